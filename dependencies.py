from typing import Optional

from atom import renderer
from converter import Converter
from jsonfeed import parser
from publisher import publisher
from reader import source

# singleton parser
_parser = parser.BasicParser()


def get_source(input_path: Optional[str]) -> source.Source:
    if input_path is None:
        return source.StdinSource()
    return source.FileSource(input_path)


def get_publisher(output_path: Optional[str], force: bool = False) -> publisher.Publisher:
    # '-' stands for stdout
    if output_path is None or output_path == "-":
        return publisher.StdoutPublisher()
    return publisher.FilePublisher(output_path, force=force)


def get_converter(output_path: Optional[str], force: bool = False, escape: bool = False) -> Converter:
    return Converter(
        parser_=_parser,
        renderer_=renderer.AtomRenderer(escape=escape),
        publisher_=get_publisher(output_path, force=force),
    )
