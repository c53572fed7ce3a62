# flisol/api/articles.py
from fastapi import APIRouter, Depends, HTTPException, Response, status

from flisol.core.deps import get_article_list_handler, get_current_caller
from flisol.core.permissions import Caller
from flisol.models.schemas import ArticleListResponse
from flisol.services.articles import AccessDenied, ArticleListHandler, BadRequest

router = APIRouter(prefix="/rest", tags=["articles"])


@router.get("/articles", response_model=ArticleListResponse,
            summary="Article titles with public image paths")
async def api_list_articles(
    response: Response,
    caller: Caller = Depends(get_current_caller),
    handler: ArticleListHandler = Depends(get_article_list_handler),
) -> ArticleListResponse:
    try:
        result = await handler.handle(caller)
    except AccessDenied:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    except BadRequest as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    response.headers["Cache-Control"] = f"max-age={result.max_age}"
    return result
