import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Depends, HTTPException, Request, Response, Form, Query
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from . import crud, schemas
from .config import PROJECT_ROOT, Settings, get_settings
from .db import SessionLocal, init_db
from .matcher import match
from .normalize import normalize_all
from .recipes import load_recipes
from .render import build_view, empty_message

logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def _resolve(app: FastAPI, dependency):
    return app.dependency_overrides.get(dependency, dependency)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables and seed the catalog once at startup. Dependencies are
    # resolved through app.dependency_overrides so tests can redirect them.
    settings = _resolve(app, get_settings)()
    db_gen = _resolve(app, get_db)()
    db = next(db_gen)
    try:
        init_db(bind=db.get_bind())
        if settings.seed_on_startup:
            recipes = load_recipes(settings.dataset_path)
            changed = crud.seed_recipes(db, recipes)
            logger.info("Seeded %d new or changed recipe(s)", changed)
    finally:
        db_gen.close()
    yield


app = FastAPI(title="Recipe Scanner", lifespan=lifespan)
templates = Jinja2Templates(directory=str(PROJECT_ROOT / "templates"))

# Allow CORS for API clients (adjust origins for production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _run_match(have, db: Session):
    recipes = crud.get_all_recipes(db)
    logger.debug("Normalized detected ingredients: %s", have)
    return recipes, match(have, recipes)


@app.get("/health")
def health(db: Session = Depends(get_db)):
    return {"status": "ok", "recipes": crud.count_recipes(db)}


@app.get("/", response_class=HTMLResponse)
def read_root(request: Request):
    return templates.TemplateResponse(
        request, "match.html", {"have_text": "", "rows": [], "message": ""}
    )


@app.post('/match', response_class=HTMLResponse)
def match_post(
    request: Request,
    ingredients: str = Form(''),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    # Receive newline-separated ingredients from the textarea
    have_text = ingredients or ''
    have = normalize_all(have_text.split('\n'))
    recipes, results = _run_match(have, db)
    context = {
        "have_text": have_text,
        "have": have,
        "rows": build_view(results, settings.shop_search_url),
        "message": empty_message(have, len(recipes), results),
    }
    return templates.TemplateResponse(request, 'match.html', context)


@app.post('/api/match', response_model=schemas.MatchResponse)
def match_api(payload: schemas.MatchRequest, db: Session = Depends(get_db)):
    _, results = _run_match(payload.ingredients, db)
    return schemas.MatchResponse(have=payload.ingredients, results=results)


@app.get('/api/recipes', response_model=schemas.RecipePage)
def list_recipes(
    request: Request,
    response: Response,
    q: str | None = None,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    size = min(page_size or settings.default_page_size, settings.max_page_size)
    total = crud.count_recipes(db, q)
    rows = crud.get_recipes(db, skip=(page - 1) * size, limit=size, q=q)

    links = []
    if page > 1:
        prev_url = request.url.include_query_params(page=page - 1, page_size=size)
        links.append(f'<{prev_url}>; rel="prev"')
    if page * size < total:
        next_url = request.url.include_query_params(page=page + 1, page_size=size)
        links.append(f'<{next_url}>; rel="next"')
    if links:
        response.headers["Link"] = ", ".join(links)

    return schemas.RecipePage(
        items=[crud.to_out(r) for r in rows],
        total=total,
        page=page,
        page_size=size,
    )


@app.get('/api/recipes/{recipe_id}', response_model=schemas.RecipeOut)
def get_recipe(recipe_id: int, db: Session = Depends(get_db)):
    r = crud.get_recipe(db, recipe_id)
    if not r:
        raise HTTPException(status_code=404, detail='Recipe not found')
    return crud.to_out(r)


def run():
    settings = get_settings()
    uvicorn.run(
        "recipe_scanner.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
