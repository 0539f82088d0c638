"""Routing, middleware, slot resolution and speech templates."""

from .interceptors import request_logger, require_account
from .middleware import Handler, Middleware, MiddlewareFunc, compose
from .skill import Skill
from .slots import new_resolved_slot, new_slot, new_slots, resolve, resolve_slot
from .speech import Template, TemplateContext, render, with_func, with_translation

__all__ = [
    "Skill",
    "Handler",
    "Middleware",
    "MiddlewareFunc",
    "compose",
    "request_logger",
    "require_account",
    "resolve",
    "resolve_slot",
    "new_slot",
    "new_resolved_slot",
    "new_slots",
    "Template",
    "TemplateContext",
    "render",
    "with_func",
    "with_translation",
]
