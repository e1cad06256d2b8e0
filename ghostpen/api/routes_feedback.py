from fastapi import APIRouter, HTTPException
from ghostpen.models.llm import FeedbackRequest
from ghostpen.services.feedback import FeedbackError, save_feedback

router = APIRouter(tags=["feedback"])

@router.post("/feedback")
def feedback(req: FeedbackRequest):
    try:
        save_feedback(req)
    except FeedbackError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "ok"}
