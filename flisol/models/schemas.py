# flisol/models/schemas.py
from pydantic import BaseModel, Field
from typing import List


ARTICLES_MAX_AGE = 24 * 60 * 60


# --- Одна статья в выдаче /rest/articles ---
class ArticleView(BaseModel):
    title: str
    image: str


# --- Ответ /rest/articles ---
# max_age уходит в заголовок Cache-Control, а не в тело
class ArticleListResponse(BaseModel):
    articles: List[ArticleView] = []
    max_age: int = Field(default=ARTICLES_MAX_AGE, exclude=True)
