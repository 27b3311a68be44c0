"""
JSON API over the calculator. Serve it with any ASGI server, e.g.

    uvicorn cache_me.web.app:app
"""
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, StrictInt, StrictStr

from cache_me.errors import InvalidTTL
from cache_me.generation.calculator import SAMPLE_INPUT, calculate
from cache_me.generation.reconstructor import format_log

app = FastAPI(title="cache-me")


class CalculateRequest(BaseModel):
    text: str
    # booleans and floats are rejected, not coerced
    minutes: StrictInt | StrictStr = 10
    routes: str = ""
    group_by_route: bool = True


class RouteCountOut(BaseModel):
    route: str
    count: int


class CalculateResponse(BaseModel):
    results: list[RouteCountOut]
    log: str
    skipped_lines: int


@app.post("/calculate", response_model=CalculateResponse)
def calculate_endpoint(req: CalculateRequest) -> CalculateResponse:
    try:
        result = calculate(req.text, req.minutes, routes=req.routes, group_by_route=req.group_by_route)
    except InvalidTTL as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return CalculateResponse(
        results=[RouteCountOut(route=r.route, count=r.count) for r in result.results],
        log=format_log(result.log),
        skipped_lines=result.skipped_lines,
    )


@app.get("/sample")
def sample() -> dict:
    return {"text": SAMPLE_INPUT}
