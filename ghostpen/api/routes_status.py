from fastapi import APIRouter, HTTPException
from ghostpen.models.llm import LlmStatus
from ghostpen.services import audit
from ghostpen.services.launch import LaunchError, NotInstalledError, launch_lm_studio
from ghostpen.services.llm import check_status

router = APIRouter(tags=["status"])

@router.get("/status", response_model=LlmStatus)
async def status():
    st = await check_status()
    audit.record("llm_status_check", {"available": st.available, "provider": st.provider})
    return st

@router.post("/launch")
def launch():
    try:
        msg = launch_lm_studio()
    except LaunchError as e:
        audit.record("llm_launch", {"success": False, "path_or_error": str(e)})
        code = 404 if isinstance(e, NotInstalledError) else 500
        raise HTTPException(status_code=code, detail=str(e))
    audit.record("llm_launch", {"success": True, "path_or_error": msg})
    return {"message": msg}
