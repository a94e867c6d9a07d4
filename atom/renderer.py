from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from logging import getLogger
from typing import Callable, Optional
from xml.sax.saxutils import escape as xml_escape

from pydantic import AwareDatetime, TypeAdapter, ValidationError

from atom import exceptions
from jsonfeed import schema
from utils import first_present

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'
# feed updated value when no item carries a date
UPDATED_FLOOR = "2000-01-01T00:00:00Z"

_AWARE_DATETIME = TypeAdapter(AwareDatetime)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def rfc3339(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parses an RFC 3339 date-time into an aware datetime.

    :raises TimestampError: if the value is not a full date-time with an offset.
    """
    try:
        return _AWARE_DATETIME.validate_python(value)
    except ValidationError as e:
        raise exceptions.TimestampError(value, e.errors()[0]["msg"]) from e


def item_updated(item: schema.Item) -> Optional[str]:
    return first_present(item.date_modified, item.date_published)


def feed_updated(feed: schema.Feed) -> str:
    """Latest item date of the feed, compared as raw text.

    String ordering matches time ordering only for uniformly formatted UTC
    timestamps.
    """
    candidates = [updated for updated in map(item_updated, feed.items or []) if updated is not None]
    return max(candidates, default=UPDATED_FLOOR)


@dataclass
class RenderResult:
    xml: str
    updated: datetime


class Renderer(ABC):
    @abstractmethod
    def render(self, feed: schema.Feed) -> RenderResult:
        """Renders the feed.

        :raises TimestampError:
        """
        raise NotImplementedError


class AtomRenderer(Renderer):

    def __init__(self, escape: bool = False, clock: Callable[[], datetime] = utc_now):
        """

        :param escape: escape markup characters in text and attribute values,
            by default values are copied into the document verbatim.
        :param clock: returns the current time, used for entries without any date.
        """
        self.escape = escape
        self.clock = clock

    def render(self, feed: schema.Feed) -> RenderResult:
        updated = feed_updated(feed)
        # fail before building anything, the caller needs the instant
        updated_instant = parse_timestamp(updated)
        getLogger().debug(f"Feed updated: {updated}")

        lines = [XML_DECLARATION, self._open_tag("feed", feed.language, f' xmlns="{ATOM_NAMESPACE}"')]

        if feed.authors:
            lines.extend(self._author(author) for author in feed.authors)
        else:
            # atom requires at least one author
            lines.append("<author><name></name></author>\n")

        lines.append(f"<title>{self._text(feed.title)}</title>\n")
        lines.append(f"<id>{self._text(first_present(feed.feed_url, feed.title))}</id>\n")

        if feed.home_page_url is not None:
            lines.append(self._link("alternate", feed.home_page_url))
        if feed.feed_url is not None:
            lines.append(self._link("self", feed.feed_url))
        if feed.description is not None:
            lines.append(f"<subtitle>{self._text(feed.description)}</subtitle>\n")
        if feed.icon is not None:
            lines.append(f"<logo>{self._text(feed.icon)}</logo>\n")

        lines.append(f"<updated>{self._text(updated)}</updated>\n")

        lines.extend(self._entry(item) for item in feed.items or [])

        lines.append("</feed>")
        return RenderResult(xml="".join(lines), updated=updated_instant)

    def _entry(self, item: schema.Item) -> str:
        lines = [self._open_tag("entry", item.language)]
        lines.append(f"<id>{self._text(item.id)}</id>\n")

        if item.title is not None:
            lines.append(f"<title>{self._text(item.title)}</title>\n")
        if item.url is not None:
            lines.append(self._link("alternate", item.url))
        if item.summary is not None:
            lines.append(f"<summary>{self._text(item.summary)}</summary>\n")

        if item.content_text is not None:
            lines.append(f'<content type="text">{self._text(item.content_text)}</content>\n')
        elif item.content_html is not None:
            lines.append(self._html_content(item.content_html))

        updated = item_updated(item)
        if updated is None:
            updated = rfc3339(self.clock())
        lines.append(f"<updated>{self._text(updated)}</updated>\n")

        if item.date_published is not None:
            lines.append(f"<published>{self._text(item.date_published)}</published>\n")

        lines.extend(self._author(author) for author in item.authors or [])
        lines.extend(self._enclosure(attachment) for attachment in item.attachments or [])

        lines.append("</entry>\n")
        return "".join(lines)

    def _author(self, author: schema.Author) -> str:
        output = f"<author>\n<name>{self._text(author.name or '')}</name>\n"
        if author.url is not None:
            output += f"<uri>{self._text(author.url)}</uri>\n"
        return output + "</author>\n"

    def _enclosure(self, attachment: schema.Attachment) -> str:
        attributes = [
            'rel="enclosure"',
            f'href="{self._attr(attachment.url)}"',
            f'type="{self._attr(attachment.mime_type)}"',
        ]
        if attachment.size_in_bytes is not None:
            attributes.append(f'length="{attachment.size_in_bytes}"')
        return f"<link {' '.join(attributes)}/>\n"

    def _link(self, rel: str, href: str) -> str:
        return f'<link rel="{rel}" href="{self._attr(href)}"/>\n'

    def _open_tag(self, name: str, language: Optional[str], attributes: str = "") -> str:
        if language is not None:
            attributes += f' xml:lang="{self._attr(language)}"'
        return f"<{name}{attributes}>\n"

    def _html_content(self, html: str) -> str:
        if self.escape:
            return f'<content type="html">{self._text(html)}</content>\n'
        return f'<content type="html"><![CDATA[ {html} ]]></content>\n'

    def _text(self, value: str) -> str:
        return xml_escape(value) if self.escape else value

    def _attr(self, value: str) -> str:
        return xml_escape(value, {'"': "&quot;"}) if self.escape else value
