########################################################################
# File name: stanzas.py
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
import abc
import typing

from . import common
from .xmlbuilder import XmlStringBuilder


def normalize_payload(data: typing.Optional[str]) -> typing.Optional[str]:
    """
    Return `data` unchanged, unless it is :data:`None`, empty or consists only
    of whitespace, in which case :data:`None` is returned.
    """
    if data is None or not data.strip():
        return None
    return data


class SASLStanza(metaclass=abc.ABCMeta):
    """
    Interface shared by all SASL negotiation elements.

    Instances are immutable: all state is passed to the constructor and
    exposed through read-only properties.

    .. attribute:: NAMESPACE

       The XML namespace of the element.

    .. attribute:: ELEMENT

       The local name of the element.

    .. automethod:: to_xml
    """

    __slots__ = ()

    NAMESPACE = common.NAMESPACE
    ELEMENT = None  # type: str

    def _set(self, **fields: typing.Any) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError(
            "{} objects are immutable".format(type(self).__name__))

    def __delattr__(self, name: str) -> None:
        raise AttributeError(
            "{} objects are immutable".format(type(self).__name__))

    @abc.abstractmethod
    def _state(self) -> typing.Tuple:
        """
        Return the fields which make up the identity of the stanza.
        """

    @abc.abstractmethod
    def to_xml(self) -> XmlStringBuilder:
        """
        Serialise the stanza and return the builder holding the result.
        """

    def __str__(self) -> str:
        return str(self.to_xml())

    def __eq__(self, other: typing.Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash((type(self), self._state()))

    def __repr__(self) -> str:
        return "<{}.{}{}>".format(
            type(self).__module__,
            type(self).__qualname__,
            "".join(" {!r}".format(field) for field in self._state()))

    def _open(self) -> XmlStringBuilder:
        return (XmlStringBuilder()
                .half_open_element(self.ELEMENT)
                .xmlns_attribute(self.NAMESPACE))


class AuthMechanism(SASLStanza):
    """
    The ``<auth/>`` element which initiates the negotiation with the given
    `mechanism`.

    `authentication_text` is the initial response. It must not be empty; if
    the mechanism has no initial response, pass
    :data:`~saslstanzas.common.EMPTY_INITIAL_RESPONSE`.

    :raises ValueError: if `mechanism` is :data:`None` or if
        `authentication_text` is :data:`None` or empty.
    """

    __slots__ = ("_mechanism", "_authentication_text")

    ELEMENT = "auth"

    def __init__(self, mechanism: str, authentication_text: str):
        super().__init__()
        if mechanism is None:
            raise ValueError("SASL mechanism must not be None")
        if not authentication_text:
            raise ValueError(
                "SASL authentication text must not be None or empty "
                "(RFC 6120, section 6.4.2)")
        self._set(_mechanism=mechanism,
                  _authentication_text=authentication_text)

    @property
    def mechanism(self) -> str:
        return self._mechanism

    @property
    def authentication_text(self) -> str:
        return self._authentication_text

    def _state(self):
        return (self._mechanism, self._authentication_text)

    def to_xml(self) -> XmlStringBuilder:
        return (self._open()
                .attribute("mechanism", self._mechanism)
                .right_angle_bracket()
                .opt_append(self._authentication_text)
                .close_element(self.ELEMENT))


class _PayloadStanza(SASLStanza):
    """
    Shared implementation of elements carrying an optional text payload.
    """

    __slots__ = ("_payload",)

    def __init__(self, payload: typing.Optional[str] = None):
        super().__init__()
        self._set(_payload=normalize_payload(payload))

    def _state(self):
        return (self._payload,)

    def to_xml(self) -> XmlStringBuilder:
        xml = self._open()
        if self._payload is None:
            return xml.close_empty_element()
        return (xml.right_angle_bracket()
                .opt_append(self._payload)
                .close_element(self.ELEMENT))


class Challenge(_PayloadStanza):
    """
    A ``<challenge/>`` sent by the server. Blank `data` is stored as
    :data:`None`.
    """

    __slots__ = ()

    ELEMENT = "challenge"

    def __init__(self, data: typing.Optional[str] = None):
        super().__init__(data)

    @property
    def data(self) -> typing.Optional[str]:
        return self._payload


class Response(_PayloadStanza):
    """
    A ``<response/>`` to a challenge. It may be constructed without
    `authentication_text`, yielding the empty response.
    """

    __slots__ = ()

    ELEMENT = "response"

    def __init__(self, authentication_text: typing.Optional[str] = None):
        super().__init__(authentication_text)

    @property
    def authentication_text(self) -> typing.Optional[str]:
        return self._payload


class Success(_PayloadStanza):
    """
    The ``<success/>`` element, optionally with additional data for the SASL
    layer (:rfc:`6120`, section 6.3.10).

    .. attribute:: data

       The additional data or :data:`None`.
    """

    __slots__ = ()

    ELEMENT = "success"

    def __init__(self, data: typing.Optional[str] = None):
        super().__init__(data)

    @property
    def data(self) -> typing.Optional[str]:
        return self._payload


class SASLFailure(SASLStanza):
    """
    The ``<failure/>`` element.

    `sasl_error_string` is the condition as it appears (or is to appear) on
    the wire and is kept verbatim. :attr:`sasl_error` holds its
    classification; conditions not defined by :rfc:`6120` are classified as
    :attr:`~.SASLErrorCondition.NOT_AUTHORIZED`.

    The serialised form always uses `sasl_error_string` as the name of the
    condition element, even when it is not a defined condition.

    `text` is an optional human-readable description.

    :raises TypeError: if `sasl_error_string` is not a :class:`str`.
    :raises ValueError: if `sasl_error_string` is empty, as it cannot name an
        element.
    """

    __slots__ = ("_sasl_error", "_sasl_error_string", "_text")

    ELEMENT = "failure"

    def __init__(
            self,
            sasl_error_string: str,
            text: typing.Optional[str] = None):
        super().__init__()
        if not isinstance(sasl_error_string, str):
            raise TypeError(
                "SASL condition must be a str, got {!r}".format(
                    sasl_error_string))
        if not sasl_error_string:
            raise ValueError("SASL condition must not be empty")
        self._set(
            _sasl_error=common.SASLErrorCondition.from_string(
                sasl_error_string),
            _sasl_error_string=sasl_error_string,
            _text=normalize_payload(text),
        )

    @property
    def sasl_error(self) -> common.SASLErrorCondition:
        return self._sasl_error

    @property
    def sasl_error_string(self) -> str:
        return self._sasl_error_string

    @property
    def text(self) -> typing.Optional[str]:
        return self._text

    def to_exception(self) -> common.SASLError:
        """
        Return an exception describing this failure.

        Conditions concerning the credentials yield
        :class:`~.AuthenticationFailure`, all others
        :class:`~.SASLProtocolFailure`. The exception is returned, not raised.
        """
        if self._sasl_error.is_credentials_error:
            cls = common.AuthenticationFailure
        else:
            cls = common.SASLProtocolFailure
        return cls(self._sasl_error_string, text=self._text)

    def _state(self):
        return (self._sasl_error_string, self._text)

    def to_xml(self) -> XmlStringBuilder:
        xml = (self._open()
               .right_angle_bracket()
               .empty_element(self._sasl_error_string))
        if self._text is not None:
            xml.element("text", self._text)
        return xml.close_element(self.ELEMENT)


class Abort(SASLStanza):
    """
    The ``<abort/>`` element by which the client cancels the negotiation
    (:rfc:`6120`, section 6.4.4).
    """

    __slots__ = ()

    ELEMENT = "abort"

    def _state(self):
        return ()

    def to_xml(self) -> XmlStringBuilder:
        return self._open().close_empty_element()
