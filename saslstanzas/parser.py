########################################################################
# File name: parser.py
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
Parsing received elements
=========================

The functions in this module turn received SASL elements back into the
stanza classes of :mod:`saslstanzas.stanzas`. The stanzas are created through
their regular constructors, so that the received data is normalised and
validated exactly like locally created stanzas.

.. autofunction:: from_element

.. autofunction:: parse
"""
import logging
import typing
import xml.etree.ElementTree as ET

from . import common, stanzas


logger = logging.getLogger(__name__)


def _tag(local_name: str) -> str:
    return "{{{}}}{}".format(common.NAMESPACE, local_name)


def _split_tag(tag: str) -> typing.Tuple[typing.Optional[str], str]:
    if tag.startswith("{"):
        namespace, _, local_name = tag[1:].partition("}")
        return namespace, local_name
    return None, tag


def _parse_auth(el: ET.Element) -> stanzas.AuthMechanism:
    mechanism = el.get("mechanism")
    if mechanism is None:
        raise common.StanzaParseError(
            "auth element without mechanism attribute")
    return stanzas.AuthMechanism(mechanism, el.text)


def _parse_challenge(el: ET.Element) -> stanzas.Challenge:
    return stanzas.Challenge(el.text)


def _parse_response(el: ET.Element) -> stanzas.Response:
    return stanzas.Response(el.text)


def _parse_success(el: ET.Element) -> stanzas.Success:
    return stanzas.Success(el.text)


def _parse_failure(el: ET.Element) -> stanzas.SASLFailure:
    condition = None
    text = None
    for child in el:
        _, local_name = _split_tag(child.tag)
        if local_name == "text":
            text = child.text
        elif condition is None:
            condition = local_name
    if condition is None:
        raise common.StanzaParseError(
            "failure element without condition")
    return stanzas.SASLFailure(condition, text=text)


def _parse_abort(el: ET.Element) -> stanzas.Abort:
    return stanzas.Abort()


_PARSERS = {
    _tag(stanzas.AuthMechanism.ELEMENT): _parse_auth,
    _tag(stanzas.Challenge.ELEMENT): _parse_challenge,
    _tag(stanzas.Response.ELEMENT): _parse_response,
    _tag(stanzas.Success.ELEMENT): _parse_success,
    _tag(stanzas.SASLFailure.ELEMENT): _parse_failure,
    _tag(stanzas.Abort.ELEMENT): _parse_abort,
}


def from_element(el: ET.Element) -> stanzas.SASLStanza:
    """
    Create the stanza represented by the :class:`~xml.etree.ElementTree.Element`
    `el`.

    :raises saslstanzas.StanzaParseError: if `el` is not a SASL element or
        lacks required parts.
    :raises ValueError: if the stanza constructor rejects the data, e.g. for
        an ``<auth/>`` without text.
    """
    try:
        parser = _PARSERS[el.tag]
    except KeyError:
        raise common.StanzaParseError(
            "not a SASL element: {!r}".format(el.tag)) from None

    stanza = parser(el)
    logger.debug("parsed %r", stanza)
    return stanza


def parse(data: typing.Union[str, bytes]) -> stanzas.SASLStanza:
    """
    Parse the serialised element `data` and return the stanza.

    :raises saslstanzas.StanzaParseError: if `data` is not well-formed XML or
        not a SASL element.
    """
    try:
        el = ET.fromstring(data)
    except ET.ParseError as exc:
        raise common.StanzaParseError(
            "malformed XML: {}".format(exc)) from exc
    return from_element(el)
