"""Conversion of XML text into an attributed node tree.

The tree is made of plain Python values: an element with attributes or
children becomes a dict (attributes under a prefixed key, children under
their tag, repeated children as a list, text under a reserved key), and an
element with neither becomes a bare scalar holding its text.

    <robot name="r"><link name="a"/><link name="b"/></robot>

    {"robot": {"@_name": "r", "link": [{"@_name": "a"}, {"@_name": "b"}]}}
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Union

from lxml import etree

_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class XMLTreeOptions:
    """Shape of the node tree produced by :func:`parse_xml`.

    Attributes:
        attribute_prefix: Prefix prepended to attribute names in node dicts.
        text_key: Key holding the text of an element that also has
            attributes or children.
        parse_tag_values: Convert numeric element text to int or float.
        remove_blank_text: Drop whitespace-only text between elements.
    """
    attribute_prefix: str = "@_"
    text_key: str = "#text"
    parse_tag_values: bool = True
    remove_blank_text: bool = True


def parse_xml(text: Union[str, bytes], options: XMLTreeOptions = XMLTreeOptions()) -> Dict[str, Any]:
    """Parse XML text into a ``{root_tag: node}`` mapping.

    Args:
        text: Complete XML document.
        options: Tree shape options.

    Returns:
        Single-entry dict keyed by the root element's local name.

    Raises:
        lxml.etree.XMLSyntaxError: If the text is not well-formed XML.
    """
    if isinstance(text, str):
        text = text.encode("utf-8")

    parser = etree.XMLParser(
        remove_blank_text=options.remove_blank_text,
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
    )
    root = etree.fromstring(text, parser=parser)
    return {_local_name(root): _convert(root, options)}


def _local_name(element_or_key) -> str:
    return etree.QName(element_or_key).localname


def _convert(element, options: XMLTreeOptions) -> Any:
    children = [child for child in element if isinstance(child.tag, str)]
    text = "".join([element.text or ""] + [child.tail or "" for child in element]).strip()

    if not element.attrib and not children:
        return _tag_value(text, options)

    node: Dict[str, Any] = {}
    for key, value in element.attrib.items():
        node[options.attribute_prefix + _local_name(key)] = value

    for child in children:
        tag = _local_name(child)
        value = _convert(child, options)
        if tag not in node:
            node[tag] = value
        elif isinstance(node[tag], list):
            node[tag].append(value)
        else:
            node[tag] = [node[tag], value]

    if text:
        node[options.text_key] = _tag_value(text, options)
    return node


def _tag_value(text: str, options: XMLTreeOptions) -> Any:
    if not options.parse_tag_values or not _NUMBER.match(text):
        return text
    try:
        return int(text)
    except ValueError:
        return float(text)
