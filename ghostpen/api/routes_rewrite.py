from fastapi import APIRouter, HTTPException
from ghostpen.models.llm import RewriteRequest, RewriteResult
from ghostpen.services.llm import RewriteError, rewrite
from ghostpen.services.providers import NoProviderError

router = APIRouter(tags=["rewrite"])

@router.post("/rewrite", response_model=RewriteResult)
async def rewrite_text(req: RewriteRequest):
    try:
        return await rewrite(req.text, req.mode)
    except (NoProviderError, RewriteError) as e:
        raise HTTPException(status_code=503, detail=str(e))
