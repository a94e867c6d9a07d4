from abc import ABC, abstractmethod
from jsonfeed import schema, exceptions
from typing import Union
from pydantic import ValidationError
from logging import getLogger


class Parser(ABC):
    @abstractmethod
    def parse(self, data: Union[str, bytes]) -> schema.Feed:
        raise NotImplementedError


class BasicParser(Parser):
    """Parses a UTF-8 JSON Feed document.

    :raises ParseError:
    """
    def parse(self, data: Union[str, bytes]) -> schema.Feed:
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as e:
                getLogger().error(f"Feed is not valid UTF-8: {e}")
                raise exceptions.ParseError(repr(e)) from e
        try:
            # authors are folded by the model validators of Feed and Item
            feed = schema.Feed.model_validate_json(data)
        except ValidationError as e:
            getLogger().error(f"Feed is not valid because of {e}")
            raise exceptions.ParseError(repr(e)) from e
        getLogger().debug(f"Parsed feed '{feed.title}' with {len(feed.items or [])} items")
        return feed
