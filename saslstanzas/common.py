########################################################################
# File name: common.py
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
import enum
import logging
import typing


logger = logging.getLogger(__name__)


#: The XML namespace shared by all SASL negotiation elements (:rfc:`6120`,
#: section 6.4).
NAMESPACE = "urn:ietf:params:xml:ns:xmpp-sasl"

#: Text to send in ``<auth/>`` when the mechanism has no initial response
#: (:rfc:`6120`, section 6.4.2).
EMPTY_INITIAL_RESPONSE = "="


class SASLErrorCondition(enum.Enum):
    """
    The defined SASL failure conditions (see :rfc:`6120`, section 6.5).

    The values are the local names of the condition elements as they appear
    on the wire.

    .. attribute:: ABORTED
    .. attribute:: ACCOUNT_DISABLED
    .. attribute:: CREDENTIALS_EXPIRED
    .. attribute:: ENCRYPTION_REQUIRED
    .. attribute:: INCORRECT_ENCODING
    .. attribute:: INVALID_AUTHZID
    .. attribute:: INVALID_MECHANISM
    .. attribute:: MALFORMED_REQUEST
    .. attribute:: MECHANISM_TOO_WEAK
    .. attribute:: NOT_AUTHORIZED
    .. attribute:: TEMPORARY_AUTH_FAILURE

    .. automethod:: from_string
    """

    ABORTED = "aborted"
    ACCOUNT_DISABLED = "account-disabled"
    CREDENTIALS_EXPIRED = "credentials-expired"
    ENCRYPTION_REQUIRED = "encryption-required"
    INCORRECT_ENCODING = "incorrect-encoding"
    INVALID_AUTHZID = "invalid-authzid"
    INVALID_MECHANISM = "invalid-mechanism"
    MALFORMED_REQUEST = "malformed-request"
    MECHANISM_TOO_WEAK = "mechanism-too-weak"
    NOT_AUTHORIZED = "not-authorized"
    TEMPORARY_AUTH_FAILURE = "temporary-auth-failure"

    @classmethod
    def from_string(
            cls,
            condition: typing.Optional[str],
            ) -> "SASLErrorCondition":
        """
        Map a condition name as received from the peer to a member of this
        enumeration.

        The lookup is exact. Any name which is not defined (including
        :data:`None`) maps to :attr:`NOT_AUTHORIZED`, since :rfc:`6120`
        requires unknown conditions to be treated as a generic
        authentication failure. This never raises.
        """
        try:
            return cls(condition)
        except ValueError:
            logger.debug(
                "unknown SASL condition %r, treating as not-authorized",
                condition)
            return cls.NOT_AUTHORIZED

    @property
    def is_credentials_error(self) -> bool:
        """
        Whether the condition concerns the credentials (as opposed to the
        mechanism or the negotiation itself).
        """
        return self in _CREDENTIALS_CONDITIONS


_CREDENTIALS_CONDITIONS = frozenset([
    SASLErrorCondition.ACCOUNT_DISABLED,
    SASLErrorCondition.CREDENTIALS_EXPIRED,
    SASLErrorCondition.INVALID_AUTHZID,
    SASLErrorCondition.NOT_AUTHORIZED,
])


class SASLError(Exception):
    """
    Base class for a SASL related error. `opaque_error` is the raw condition
    name as sent by the peer and `kind` is a string which helps identifying
    the class of the error; this is set implicitly by the constructors of
    :class:`SASLProtocolFailure` and :class:`AuthenticationFailure`, which you
    are encouraged to use.

    `text` may be a human-readable string describing the error condition in
    more detail.

    .. attribute:: opaque_error

       The value passed to the respective constructor argument.

    .. attribute:: condition

       The :class:`SASLErrorCondition` `opaque_error` classifies as.

    .. attribute:: text

       The value passed to the respective constructor argument.

    """

    def __init__(
            self,
            opaque_error: str,
            kind: str,
            text: typing.Optional[str] = None):
        msg = "{}: {}".format(opaque_error, kind)
        if text:
            msg += ": {}".format(text)
        super().__init__(msg)
        self.opaque_error = opaque_error
        self.condition = SASLErrorCondition.from_string(opaque_error)
        self.text = text


class AuthenticationFailure(SASLError):
    """
    A SASL error which indicates that the provided credentials are
    invalid.
    """

    def __init__(
            self,
            opaque_error: str,
            text: typing.Optional[str] = None):
        super().__init__(opaque_error, "authentication failed", text=text)


class SASLProtocolFailure(SASLError):
    """
    A SASL failure which is unrelated to the credentials passed, for example
    an unsupported mechanism or a malformed request.
    """

    def __init__(
            self,
            opaque_error: str,
            text: typing.Optional[str] = None):
        super().__init__(opaque_error, "SASL failure", text=text)


class StanzaParseError(ValueError):
    """
    Raised when an XML element cannot be turned into a SASL stanza.
    """
