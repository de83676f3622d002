"""Notion page normalizer.

Transforms raw Notion database pages into PortfolioItem instances. Page
properties are loosely typed wrappers tagged by a ``type`` discriminator
(``title``, ``rich_text``, ``select``, ``multi_select``, ``date``, ``files``,
``checkbox``, ``created_time``); every accessor here checks the tag before
reading the payload and degrades to None on any unexpected shape.
"""

import re
from typing import Any, Optional

import structlog

from signfolio.models.portfolio import PortfolioItem

logger = structlog.get_logger(__name__)


# =============================================================================
# Database Schema
# =============================================================================

TITLE_FIELD = "병원명"
LOCATION_FIELD = "위치"
CATEGORY_FIELD = "시공종류"  # multi_select
LEGACY_CATEGORY_FIELD = "간판종류"  # select
CATEGORY_SEPARATOR = " · "
COMPLETED_AT_FIELD = "시공완료"
DEPARTMENTS_FIELD = "진료과목"
DESCRIPTION_FIELD = "설명"
CREATED_TIME_FIELD = "작성일"
VISIBILITY_FIELD = "노출여부"

# Candidate names in priority order; the first one carrying a files array wins
COVER_IMAGE_FIELDS = ("메인이미지", "메인 이미지", "대표이미지", "대표 이미지")
ADDITIONAL_IMAGE_FIELDS = ("보조이미지", "추가이미지")

# Where a files entry may keep its URL, tried in order
FILE_URL_SHAPES = (
    ("file", "url"),
    ("external", "url"),
    ("name",),
)

_URL_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
_NON_HEX = re.compile(r"[^0-9a-fA-F]")
_HEX32 = re.compile(r"^[0-9a-fA-F]{32}$")


# =============================================================================
# Identifiers
# =============================================================================


def normalize_to_32hex(value: Any) -> Optional[str]:
    """Reduce any page id form to its canonical 32-hex-digit core.

    Non-hex characters are stripped and the last 32 digits kept, so hyphenated
    ids, bare ids and slugs ending in an id all map to the same value.

    Args:
        value: Page id, URL slug, or anything else.

    Returns:
        The lowercase 32-digit hex string, or None when fewer than 32 digits remain.
    """
    if not value:
        return None
    core = _NON_HEX.sub("", str(value))[-32:]
    return core.lower() if _HEX32.match(core) else None


def to_hyphenated_id(hex32: str) -> str:
    """Format a canonical id as 8-4-4-4-12, the form Notion expects in paths."""
    return f"{hex32[:8]}-{hex32[8:12]}-{hex32[12:16]}-{hex32[16:20]}-{hex32[20:]}"


# =============================================================================
# Property Accessors
# =============================================================================


def property_value(prop: Any, expected_type: str) -> Any:
    """Return a property's payload if the wrapper is tagged as expected_type.

    Wrappers without a ``type`` tag are accepted when they carry the payload
    key, which covers hand-built and older API records.
    """
    if not isinstance(prop, dict):
        return None
    tag = prop.get("type")
    if tag is not None and tag != expected_type:
        return None
    return prop.get(expected_type)


def _join_fragments(fragments: Any, separator: str) -> str:
    if not isinstance(fragments, list):
        return ""
    parts = []
    for fragment in fragments:
        if not isinstance(fragment, dict):
            continue
        text = fragment.get("plain_text")
        if text is None and isinstance(fragment.get("text"), dict):
            text = fragment["text"].get("content")
        if isinstance(text, str):
            parts.append(text)
    return separator.join(parts)


def get_text(props: dict, name: str, separator: str = "") -> Optional[str]:
    """Concatenate the rich_text fragments of a property, None when empty."""
    return _join_fragments(property_value(props.get(name), "rich_text"), separator) or None


def get_select_name(props: dict, name: str) -> Optional[str]:
    option = property_value(props.get(name), "select")
    if isinstance(option, dict) and isinstance(option.get("name"), str):
        return option["name"] or None
    return None


def get_multi_select_names(props: dict, name: str) -> list[str]:
    options = property_value(props.get(name), "multi_select")
    if not isinstance(options, list):
        return []
    return [
        option["name"]
        for option in options
        if isinstance(option, dict) and isinstance(option.get("name"), str) and option["name"]
    ]


def get_date_start(props: dict, name: str) -> Optional[str]:
    value = property_value(props.get(name), "date")
    if isinstance(value, dict) and isinstance(value.get("start"), str):
        return value["start"] or None
    return None


def get_files(props: dict, candidates: tuple[str, ...]) -> Optional[list]:
    """Return the files array of the first candidate property that has one."""
    for name in candidates:
        files = property_value(props.get(name), "files")
        if isinstance(files, list):
            return files
    return None


def find_title_property(props: dict) -> Any:
    """Resolve the title property: the known field first, else the first tagged title."""
    if props.get(TITLE_FIELD):
        return props[TITLE_FIELD]
    for prop in props.values():
        if isinstance(prop, dict) and prop.get("type") == "title":
            return prop
    return None


# =============================================================================
# File URLs
# =============================================================================


def is_usable_url(value: Any) -> bool:
    """Check that a value is a non-empty http(s) URL string."""
    return isinstance(value, str) and bool(_URL_SCHEME.match(value.strip()))


def extract_file_url(entry: Any) -> Optional[str]:
    """Extract the URL of one files entry.

    Handles hosted files (``file.url``), external links (``external.url``),
    a ``name`` that holds a URL, and bare URL strings.

    Args:
        entry: One element of a Notion files array.

    Returns:
        The first usable http(s) URL, or None.
    """
    if isinstance(entry, str):
        return entry.strip() if is_usable_url(entry) else None
    if not isinstance(entry, dict):
        return None

    for shape in FILE_URL_SHAPES:
        candidate: Any = entry
        for key in shape:
            candidate = candidate.get(key) if isinstance(candidate, dict) else None
        if is_usable_url(candidate):
            return candidate.strip()
    return None


def extract_file_urls(files: Any) -> list[str]:
    """Extract every usable URL from a files array, preserving order."""
    if not isinstance(files, list):
        return []
    urls = []
    for entry in files:
        url = extract_file_url(entry)
        if url:
            urls.append(url)
        else:
            logger.debug("file_entry_without_url", entry_type=type(entry).__name__)
    return urls


def extract_first_file_url(files: Any) -> Optional[str]:
    urls = extract_file_urls(files)
    return urls[0] if urls else None


# =============================================================================
# Page Normalization
# =============================================================================


def normalize_page(page: Any) -> Optional[PortfolioItem]:
    """Transform a Notion page into a PortfolioItem.

    Args:
        page: Raw page object from the query or retrieve endpoint.

    Returns:
        Normalized PortfolioItem, or None if the page has no title.
    """
    if not isinstance(page, dict) or not isinstance(page.get("properties"), dict):
        return None
    page_id = page.get("id") or ""
    props = page["properties"]

    title = _join_fragments(property_value(find_title_property(props), "title"), "")
    if not title:
        logger.debug("page_without_title", page_id=page_id)
        return None

    # Current multi_select category first, then the legacy select
    categories = get_multi_select_names(props, CATEGORY_FIELD)
    category = (
        CATEGORY_SEPARATOR.join(categories)
        if categories
        else get_select_name(props, LEGACY_CATEGORY_FIELD)
    )

    cover_files = get_files(props, COVER_IMAGE_FIELDS)
    cover_image_urls = extract_file_urls(cover_files)
    if not cover_image_urls:
        logger.debug("page_without_cover_image", page_id=page_id)

    created_time = property_value(props.get(CREATED_TIME_FIELD), "created_time")
    if not isinstance(created_time, str) or not created_time:
        created_time = page.get("created_time")
    if not isinstance(created_time, str):
        created_time = None

    departments = get_multi_select_names(props, DEPARTMENTS_FIELD)

    return PortfolioItem(
        id=str(page_id),
        title=title,
        location=get_text(props, LOCATION_FIELD),
        type=category,
        completed_at=get_date_start(props, COMPLETED_AT_FIELD),
        departments=departments or None,
        cover_image_url=extract_first_file_url(cover_files),
        cover_image_urls=cover_image_urls,
        additional_image_urls=extract_file_urls(get_files(props, ADDITIONAL_IMAGE_FIELDS)),
        description=get_text(props, DESCRIPTION_FIELD, separator="\n"),
        created_time=created_time or None,
    )


def normalize_pages(pages: Any) -> list[PortfolioItem]:
    """Normalize a list of pages, dropping those that yield no item."""
    if not isinstance(pages, list):
        return []
    items = []
    for page in pages:
        item = normalize_page(page)
        if item is not None:
            items.append(item)
    return items
