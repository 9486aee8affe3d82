########################################################################
# File name: xmlbuilder.py
# This file is part of: saslstanzas
#
# LICENSE
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program.  If not, see
# <http://www.gnu.org/licenses/>.
#
########################################################################
"""
Building XML strings
====================

.. autoclass:: XmlStringBuilder
"""
import typing

from xml.sax.saxutils import escape


_ATTRIBUTE_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
    "\t": "&#9;",
    "\n": "&#10;",
    "\r": "&#13;",
}

# parsers normalise line endings in character data
_TEXT_ENTITIES = {
    "\r": "&#13;",
}


class XmlStringBuilder:
    """
    Incrementally assemble serialised XML.

    All mutating methods return the builder itself, so that calls can be
    chained::

        xml = XmlStringBuilder()
        xml.half_open_element("auth").xmlns_attribute(ns).right_angle_bracket()

    Text content and attribute values are escaped. Element and attribute names
    are emitted as given.
    """

    def __init__(self):
        super().__init__()
        self._parts = []  # type: typing.List[str]

    def half_open_element(self, name: str) -> "XmlStringBuilder":
        self._parts.append("<")
        self._parts.append(name)
        return self

    def attribute(self, name: str, value: str) -> "XmlStringBuilder":
        self._parts.append(' {}="{}"'.format(
            name,
            escape(value, _ATTRIBUTE_ENTITIES)))
        return self

    def xmlns_attribute(self, namespace: str) -> "XmlStringBuilder":
        return self.attribute("xmlns", namespace)

    def right_angle_bracket(self) -> "XmlStringBuilder":
        self._parts.append(">")
        return self

    def close_empty_element(self) -> "XmlStringBuilder":
        self._parts.append("/>")
        return self

    def close_element(self, name: str) -> "XmlStringBuilder":
        self._parts.append("</{}>".format(name))
        return self

    def empty_element(self, name: str) -> "XmlStringBuilder":
        return self.half_open_element(name).close_empty_element()

    def opt_append(self, text: typing.Optional[str]) -> "XmlStringBuilder":
        """
        Append `text` as character data, unless it is :data:`None`.
        """
        if text is not None:
            self._parts.append(escape(text, _TEXT_ENTITIES))
        return self

    def element(self, name: str, text: str) -> "XmlStringBuilder":
        return (self.half_open_element(name)
                .right_angle_bracket()
                .opt_append(text)
                .close_element(name))

    def __str__(self) -> str:
        return "".join(self._parts)
