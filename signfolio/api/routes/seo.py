"""sitemap.xml and robots.txt endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from signfolio.api.dependencies import get_portfolio_service
from signfolio.config.settings import Settings, get_settings
from signfolio.services.portfolio import PortfolioService
from signfolio.services.sitemap import generate_sitemap, render_robots_txt

router = APIRouter(tags=["SEO"])


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap(
    settings: Settings = Depends(get_settings),
    service: PortfolioService = Depends(get_portfolio_service),
) -> Response:
    body = await generate_sitemap(service, settings.site_url)
    return Response(content=body, media_type="application/xml")


@router.get("/robots.txt", include_in_schema=False)
async def robots(settings: Settings = Depends(get_settings)) -> PlainTextResponse:
    return PlainTextResponse(render_robots_txt(settings.site_url))
