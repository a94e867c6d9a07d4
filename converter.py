from logging import getLogger
from typing import Union

from atom import renderer
from jsonfeed import parser
from publisher import publisher


class Converter:
    """Parses a JSON Feed document, renders it as Atom and hands it to a publisher."""

    def __init__(
            self,
            parser_: parser.Parser,
            renderer_: renderer.Renderer,
            publisher_: publisher.Publisher,
    ):
        self.parser = parser_
        self.renderer = renderer_
        self.publisher = publisher_

    def convert(self, data: Union[str, bytes]) -> bool:
        """Converts one JSON Feed document and publishes the Atom result.

        :returns: whether the output was written.
        :raises ParseError: if data is not a valid JSON Feed.
        :raises TimestampError: if the feed update time can't be parsed.
        :raises OSError:
        """
        feed = self.parser.parse(data)
        # rendering completes before anything is written
        result = self.renderer.render(feed)
        written = self.publisher.publish(result.xml, result.updated)
        if not written:
            getLogger().info(f"Feed '{feed.title}' unchanged since {result.updated}")
        return written
