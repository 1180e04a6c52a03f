"""Prompt templates -- one fixed Jinja2 template per intent plus the library layout."""

from src.core.templates.engine import (
    build_generic_prompt,
    build_ooo_prompt,
    build_prd_prompt,
    build_product_req_prompt,
    build_status_update_prompt,
    render_library_record,
)

__all__ = [
    "build_generic_prompt",
    "build_ooo_prompt",
    "build_prd_prompt",
    "build_product_req_prompt",
    "build_status_update_prompt",
    "render_library_record",
]
