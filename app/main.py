from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from datetime import datetime
from typing import List
import time
import uuid
from app.models import (
    MatchRequest,
    MatchResponse,
    Recipe,
    ReorderRequest,
    ReorderResponse,
)
from app.services.matcher import recipe_matcher, reorder
from app.services.recipe_service import RecipeSourceError, recipe_service
from app.core.logging_config import get_logger

app = FastAPI(title="Recipe Matcher API", version="0.1.0")
logger = get_logger(__name__)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = str(uuid.uuid4())
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000.0
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} "
        f"{duration_ms:.1f}ms request_id={request_id}"
    )
    response.headers["X-Request-ID"] = request_id
    return response

@app.exception_handler(RecipeSourceError)
async def recipe_source_error_handler(request: Request, exc: RecipeSourceError):
    logger.error(f"Recipe catalog failure: {exc.errors}")
    return JSONResponse(
        status_code=502,
        content={
            "error_code": "CATALOG_UNAVAILABLE",
            "message": "Failed to load the recipe catalog.",
            "sources": exc.sources,
            "errors": exc.errors
        }
    )

@app.get("/")
def read_root():
    return {"message": "Welcome to the Recipe Matcher API. Visit /docs for documentation."}


@app.get("/api/recipes", response_model=List[Recipe])
def list_recipes():
    """
    Return the full recipe catalog in catalog order.
    """
    return list(recipe_service.get_catalog())


@app.get("/api/recipes/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: int):
    """
    Return one recipe for the detail view.
    """
    recipe = recipe_service.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error_code": "RECIPE_NOT_FOUND",
                "message": f"No recipe with id {recipe_id}."
            }
        )
    return recipe


@app.post("/api/match", response_model=MatchResponse)
def match_recipes(request: MatchRequest):
    """
    Score the catalog against the submitted preferences and return the matches.
    """
    recipes = recipe_matcher.recommend(request.preferences, request.sort_by)
    return MatchResponse(
        match_id=str(uuid.uuid4()),
        generated_at=datetime.now().isoformat(timespec="seconds"),
        sort_by=request.sort_by,
        total_matches=len(recipes),
        recipes=recipes
    )


@app.post("/api/reorder", response_model=ReorderResponse)
def reorder_recipes(request: ReorderRequest):
    """
    Re-sort an already matched list without scoring it again.
    """
    return ReorderResponse(
        sort_by=request.sort_by,
        recipes=reorder(request.recipes, request.sort_by)
    )
