import time
from fastapi import APIRouter
from ghostpen.models.grammar import CheckRequest, CheckResult
from ghostpen.services import audit
from ghostpen.services.grammar import check_text

router = APIRouter(tags=["check"])

# plain def: FastAPI runs it in the threadpool, off the event loop
@router.post("/check", response_model=CheckResult)
def check(req: CheckRequest):
    started = time.perf_counter()
    result = check_text(req.text)
    audit.record("grammar_check", {
        "word_count": result.stats.word_count,
        "issue_count": result.stats.issue_count,
        "duration_ms": int((time.perf_counter() - started) * 1000),
    })
    return result
