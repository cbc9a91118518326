from fastapi import FastAPI, Depends, HTTPException
from fastapi.responses import HTMLResponse
from database import close_db, get_db, init_db
from errors import KanbanError
from logging_setup import get_logger, setup_logging
from managers import DB
from middleware.cors import setup_cors
log = get_logger("kanban.http")
app = FastAPI(title="GoKan API", version="1.0.0")
setup_cors(app)
@app.on_event("startup")
async def startup_event():
    setup_logging()
    await init_db()
@app.on_event("shutdown")
async def shutdown_event():
    await close_db()
@app.get("/", response_class=HTMLResponse)
async def index():
    return "<strong>Index page</strong>"
@app.get("/health")
async def health(db: DB = Depends(get_db)):
    try:
        ready = await db.system.is_table_exist("person")
    except KanbanError as e:
        log.error("Health check failed: %s", e)
        raise HTTPException(status_code=503, detail="Database unavailable")
    if not ready:
        log.warning("Health check: schema is not provisioned")
    return {"status": "ok" if ready else "unprovisioned", "schema": ready}
