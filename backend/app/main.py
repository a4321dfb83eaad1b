from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from areasolver import compile_expression, evaluate_table, normalize_expression
from areasolver.config import DEFAULT_XS
from areasolver.result import to_latex
from areasolver.session import Session

app = FastAPI(title="AreaSolver API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ExpressionRequest(BaseModel):
    expression: str


class NormalizeResponse(BaseModel):
    expression: str
    normalized: str
    latex: str


class TableRequest(BaseModel):
    f: str
    g: str
    xs: list[float]


class TableResponse(BaseModel):
    xs: list[float]
    f_values: list[Optional[float]]
    g_values: list[Optional[float]]


class SolveRequest(BaseModel):
    f: str
    g: str
    xs: Optional[list[float]] = None
    limit_from: Optional[float] = None
    limit_to: Optional[float] = None


class StepInfo(BaseModel):
    title: str
    content: str


class SolveResponse(BaseModel):
    f: str
    g: str
    f_normalized: str
    g_normalized: str
    f_latex: str
    g_latex: str
    xs: list[float]
    f_values: list[Optional[float]]
    g_values: list[Optional[float]]
    intersections: list[float]
    no_intersection: bool
    limit_from: Optional[float]
    limit_to: Optional[float]
    steps: list[StepInfo]
    area: Optional[float]
    area_detail: str


def _require(*expressions: str) -> None:
    for expr in expressions:
        if not expr.strip():
            raise HTTPException(status_code=400, detail="Expression cannot be empty.")


@app.post("/api/normalize", response_model=NormalizeResponse)
def normalize(req: ExpressionRequest):
    _require(req.expression)
    normalized = normalize_expression(req.expression)
    return {
        "expression": req.expression,
        "normalized": normalized,
        "latex": to_latex(normalized),
    }


@app.post("/api/table", response_model=TableResponse)
def table(req: TableRequest):
    _require(req.f, req.g)
    f = compile_expression(normalize_expression(req.f))
    g = compile_expression(normalize_expression(req.g))
    values = evaluate_table(req.xs, f, g)
    return {"xs": req.xs, "f_values": values["f"], "g_values": values["g"]}


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: SolveRequest):
    _require(req.f, req.g)
    try:
        session = Session(req.f, req.g, req.xs if req.xs is not None else DEFAULT_XS)
        # User limits replace the derived ones only when both are given.
        if req.limit_from is not None and req.limit_to is not None:
            session.set_limits(req.limit_from, req.limit_to)
        result = session.to_dict()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    return result
