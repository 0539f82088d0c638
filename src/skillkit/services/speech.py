"""Localized speech templates backed by Jinja2."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Callable

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, meta
from jinja2 import Template as JinjaTemplate

from ..config import settings
from ..exceptions import TemplateDefinitionError, TemplateEvaluationError

# Names every template can reference without registering a helper.
CONTEXT_NAMES = frozenset({"language", "now", "value"})

_FUNC_ORDER = 0
_TRANSLATION_ORDER = 1


def normalize_locale(locale: str) -> str:
    """
    Canonicalize a locale tag: ``es_mx`` -> ``es-MX``, ``zh-hant-tw`` -> ``zh-Hant-TW``.
    """
    parts = [p for p in re.split(r"[-_]", (locale or "").strip()) if p]
    if not parts:
        return ""

    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 2 and part.isalpha():
            normalized.append(part.upper())
        elif len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        else:
            normalized.append(part)
    return "-".join(normalized)


def locale_chain(locale: str) -> list[str]:
    """
    List the tags to try for a locale, most specific first.

    "es-MX" yields ["es-MX", "es"]. The root (empty) tag is not included; once
    the chain is exhausted the template falls back to its base language.
    """
    tag = normalize_locale(locale)
    chain = []
    while tag:
        chain.append(tag)
        tag = tag.rpartition("-")[0]
    return chain


@dataclass(frozen=True)
class TemplateContext:
    """
    The single piece of data a template is evaluated against.

    Templates see ``language`` (the request locale), ``now`` (evaluation time)
    and ``value`` (whatever the handler computed for this response).
    """

    language: str
    now: datetime = field(default_factory=datetime.now)
    value: Any = None


@dataclass(frozen=True)
class TemplateOption:
    """Use ``with_func`` or ``with_translation`` rather than building these directly."""

    order: int
    apply: Callable[["Template"], None]


def with_func(name: str, function: Callable[..., Any]) -> TemplateOption:
    """Make ``function`` available to every translation as ``name(...)`` or ``|name``."""

    def apply(template: "Template") -> None:
        template._env.globals[name] = function
        template._env.filters[name] = function

    return TemplateOption(order=_FUNC_ORDER, apply=apply)


def with_translation(locale: str, speech: str) -> TemplateOption:
    """Define a version of the response for ``locale``. Plain text or SSML both work."""

    def apply(template: "Template") -> None:
        template._translations[normalize_locale(locale)] = template._compile(locale, speech)

    return TemplateOption(order=_TRANSLATION_ORDER, apply=apply)


class Template:
    """
    One kind of speech response a handler can return.

    If an intent can say one of five things depending on its input, create five
    templates and pick the one to evaluate. Construct templates once at startup;
    they are read-only afterwards and safe to share between requests.

    Helpers registered with ``with_func`` are always applied before any
    ``with_translation``, whatever order they were passed in, so translations
    can call them. The base speech is applied last and always wins for
    ``base_locale``.
    """

    def __init__(
        self,
        base_speech: str,
        *options: TemplateOption,
        base_locale: str | None = None,
    ) -> None:
        self.base_locale = normalize_locale(base_locale or settings.default_locale)
        self._env = Environment(undefined=StrictUndefined, autoescape=False)
        self._translations: dict[str, JinjaTemplate] = {}

        for option in sorted(options, key=lambda opt: opt.order):
            option.apply(self)

        with_translation(self.base_locale, base_speech).apply(self)
        self._translations = MappingProxyType(self._translations)

    @property
    def locales(self) -> list[str]:
        return sorted(self._translations)

    def _compile(self, locale: str, speech: str) -> JinjaTemplate:
        try:
            parsed = self._env.parse(speech)
            unknown = meta.find_undeclared_variables(parsed) - CONTEXT_NAMES - set(self._env.globals)
            if unknown:
                raise TemplateDefinitionError(
                    f"translation '{locale}' references unknown names: {', '.join(sorted(unknown))}"
                )
            return self._env.from_string(speech)
        except TemplateSyntaxError as e:
            raise TemplateDefinitionError(f"translation '{locale}' does not compile: {e}") from e

    def translation_for(self, locale: str) -> JinjaTemplate:
        """Walk the locale chain (es-MX -> es -> root) and fall back to the base language."""
        for tag in locale_chain(locale):
            localized = self._translations.get(tag)
            if localized is not None:
                return localized
        return self._translations[self.base_locale]

    def eval(self, ctx: TemplateContext) -> str:
        """Render the translation matching ``ctx.language``."""
        localized = self.translation_for(ctx.language)
        try:
            output = localized.render(language=ctx.language, now=ctx.now, value=ctx.value)
        except Exception as e:
            raise TemplateEvaluationError(f"template eval: {e}") from e
        return output.strip()


def render(template: Template, locale: str, value: Any = None, now: datetime | None = None) -> str:
    """Shorthand for evaluating ``template`` without building a context by hand."""
    ctx = TemplateContext(language=locale, now=now or datetime.now(), value=value)
    return template.eval(ctx)
