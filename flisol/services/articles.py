from __future__ import annotations

import logging
from typing import List

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from flisol.core.permissions import ACCESS_CONTENT, AuthorizationProvider, Caller
from flisol.models.content_models import FileManaged, NodeFieldData, NodeFieldImage
from flisol.models.schemas import ARTICLES_MAX_AGE, ArticleListResponse, ArticleView
from flisol.services.files import PublicPathResolver, rewrite_storage_uri


logger = logging.getLogger("flisol.articles")

ARTICLE_BUNDLE = "article"


class AccessDenied(Exception):
    pass


class BadRequest(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def build_article_query() -> Select:
    """Articles joined to their image field and managed file.

    Inner joins: nodes without an image, or whose image points at a missing
    file record, drop out of the result. No ORDER BY is applied.
    """
    return (
        select(NodeFieldData.title, FileManaged.uri)
        .select_from(NodeFieldData)
        .join(NodeFieldImage, NodeFieldImage.entity_id == NodeFieldData.nid)
        .join(FileManaged, FileManaged.fid == NodeFieldImage.field_image_target_id)
        .where(NodeFieldData.type == ARTICLE_BUNDLE)
    )


class ArticleListHandler:
    def __init__(
        self,
        authorization: AuthorizationProvider,
        session: AsyncSession,
        resolver: PublicPathResolver,
    ) -> None:
        self.authorization = authorization
        self.session = session
        self.resolver = resolver

    async def handle(self, caller: Caller) -> ArticleListResponse:
        if not self.authorization.has_permission(caller, ACCESS_CONTENT):
            logger.warning(
                "Article list denied",
                extra={
                    "event": "articles_access_denied",
                    "caller_id": caller.id,
                    "anonymous": caller.is_anonymous,
                },
            )
            raise AccessDenied()

        base_path = self.resolver.get_public_base_path()
        # all or nothing: a bad row fails the whole list
        try:
            res = await self.session.execute(build_article_query())
            articles: List[ArticleView] = [
                ArticleView(title=row["title"], image=rewrite_storage_uri(row["uri"], base_path))
                for row in res.mappings().all()
            ]
        except Exception:
            logger.exception("Article query failed", extra={"event": "articles_query_failed"})
            raise BadRequest("Could not find articles") from None
        return ArticleListResponse(articles=articles, max_age=ARTICLES_MAX_AGE)
