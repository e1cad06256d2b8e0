from fastapi import FastAPI
from ghostpen.api.routes_check import router as check_router
from ghostpen.api.routes_rewrite import router as rewrite_router
from ghostpen.api.routes_status import router as status_router
from ghostpen.middleware.limits import BodySizeLimitMiddleware
from ghostpen.api.routes_feedback import router as feedback_router

app = FastAPI(title="Ghostpen")

app.add_middleware(BodySizeLimitMiddleware)

@app.get("/health")
def health():
    return {"status": "ok"}

app.include_router(check_router)
app.include_router(rewrite_router)
app.include_router(status_router)
app.include_router(feedback_router)
