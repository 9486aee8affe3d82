########################################################################
# File name: __init__.py
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
SASL negotiation elements for XMPP
==================================

This package models the elements exchanged during SASL authentication over
XMPP (:rfc:`6120`, section 6). It does not implement any SASL mechanism and
does not track the state of a negotiation; it only provides the elements,
their validation and their serialisation::

    auth = saslstanzas.AuthMechanism("PLAIN", "AGFkbWluAHBhc3M=")
    xmlstream.send(str(auth))

    reply = saslstanzas.parse(received)
    if isinstance(reply, saslstanzas.SASLFailure):
        raise reply.to_exception()

Stanzas are immutable. Optional payloads which are empty or whitespace-only
are stored as :data:`None`. The initial response of ``<auth/>`` is mandatory;
mechanisms without an initial response must send
:data:`EMPTY_INITIAL_RESPONSE`.

Stanza classes
==============

.. autoclass:: SASLStanza

.. autoclass:: AuthMechanism

.. autoclass:: Challenge

.. autoclass:: Response

.. autoclass:: Success

.. autoclass:: SASLFailure

.. autoclass:: Abort

Failure conditions
==================

.. autoclass:: SASLErrorCondition

Parsing
=======

.. autofunction:: parse

.. autofunction:: from_element

Exception classes
=================

.. autoclass:: SASLError

.. autoclass:: SASLProtocolFailure

.. autoclass:: AuthenticationFailure

.. autoclass:: StanzaParseError

Version information
===================

.. autodata:: __version__

.. autodata:: version_info
"""  # NOQA

from .common import (  # noqa:F401
    AuthenticationFailure,
    EMPTY_INITIAL_RESPONSE,
    NAMESPACE,
    SASLError,
    SASLErrorCondition,
    SASLProtocolFailure,
    StanzaParseError,
)

from .stanzas import (  # noqa:F401
    Abort,
    AuthMechanism,
    Challenge,
    Response,
    SASLFailure,
    SASLStanza,
    Success,
    normalize_payload,
)

from .parser import (  # noqa:F401
    from_element,
    parse,
)

from .version import version, __version__, version_info  # noqa:F401

#: The imported :mod:`saslstanzas` version as a tuple.
#:
#: The components of the tuple are, in order: `major version`, `minor version`,
#: `patch level`, and `pre-release identifier`.
version_info = version_info

#: The imported :mod:`saslstanzas` version as a string.
#:
#: The version number is dot-separated; in pre-release or development versions,
#: the version number is followed by a hypen-separated pre-release identifier.
__version__ = __version__
