"""
Route templates such as "/:season/:eventId" and first-match-wins path matching.

A template is a "/"-separated list of segments. A segment starting with ":"
is a named parameter and "*" is an anonymous wildcard; both match any single
non-empty path segment. Every other segment must equal the path segment.
Paths that do not start with "/" never match a template.
"""
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from cache_me.errors import MalformedTemplate

logger = logging.getLogger(__name__)

PARAM_SIGIL = ":"
WILDCARD = "*"

_PARAM_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class Literal:
    value: str

    def matches(self, segment: str) -> bool:
        return segment == self.value


@dataclass(frozen=True)
class Param:
    name: str | None  # None for the "*" wildcard

    def matches(self, segment: str) -> bool:
        return segment != ""


Segment = Literal | Param


@dataclass(frozen=True)
class RouteTemplate:
    source: str
    segments: tuple[Segment, ...]

    def matches(self, path: str) -> bool:
        if not path.startswith("/"):
            return False
        parts = split_path(path)
        if len(parts) != len(self.segments):
            return False
        return all(seg.matches(part) for seg, part in zip(self.segments, parts))


@dataclass(frozen=True)
class Matched:
    template: str


class NoMatch:
    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = NoMatch()


@dataclass(frozen=True)
class CompiledMatcher:
    templates: tuple[RouteTemplate, ...] = ()

    def match(self, path: str) -> Matched | NoMatch:
        return match(path, self)

    def key_for(self, path: str) -> str:
        """Aggregation key for a path: the matching template string, else the path itself."""
        result = match(path, self)
        if isinstance(result, Matched):
            return result.template
        return path


def split_path(path: str) -> list[str]:
    if path.startswith("/"):
        path = path[1:]
    return path.split("/")


def _parse_segment(template: str, segment: str) -> Segment:
    if segment == WILDCARD:
        return Param(name=None)
    if segment.startswith(PARAM_SIGIL):
        name = segment[len(PARAM_SIGIL):]
        if not _PARAM_NAME.match(name):
            raise MalformedTemplate(template, f"invalid parameter segment {segment!r}")
        return Param(name=name)
    return Literal(segment)


def compile_template(template: str) -> RouteTemplate:
    """Compile one template string, raising MalformedTemplate if it cannot be parsed."""
    source = template.strip()
    if not source.startswith("/"):
        raise MalformedTemplate(template, "must start with '/'")
    segments = tuple(_parse_segment(source, seg) for seg in split_path(source))
    names = [seg.name for seg in segments if isinstance(seg, Param) and seg.name]
    if len(names) != len(set(names)):
        raise MalformedTemplate(template, "duplicate parameter name")
    return RouteTemplate(source=source, segments=segments)


def compile_templates(template_strings: Iterable[str]) -> CompiledMatcher:
    """Compile templates in order, dropping any that are malformed."""
    compiled: list[RouteTemplate] = []
    for template in template_strings:
        try:
            compiled.append(compile_template(template))
        except MalformedTemplate as e:
            logger.warning("cache-me: dropping route template: %s", e)
    return CompiledMatcher(templates=tuple(compiled))


def match(path: str, matcher: CompiledMatcher) -> Matched | NoMatch:
    for template in matcher.templates:
        if template.matches(path):
            return Matched(template=template.source)
    return NO_MATCH
