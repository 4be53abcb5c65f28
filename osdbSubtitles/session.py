# -*- coding: utf-8 -*-
# One logical OSDb session: the user agent plus the token issued by LogIn.
#
# The state is an immutable snapshot and every mutation swaps it in one
# assignment, so a reader never observes a half-updated session. Nothing
# serializes concurrent LogIn calls; callers that share a Session across
# threads must order session-mutating calls themselves.

import collections

from .lib.errors import PreconditionError, TOKEN_NOT_SET_MESSAGE, USER_AGENT_NOT_SET_MESSAGE

_State = collections.namedtuple('_State', ['user_agent', 'token'])


class Session(object):
    def __init__(self, user_agent='', token=None):
        self._state = _State(user_agent or '', token or None)

    @property
    def user_agent(self):
        return self._state.user_agent

    @property
    def token(self):
        return self._state.token

    @property
    def is_authenticated(self):
        return bool(self._state.token)

    def set_user_agent(self, agent):
        self._state = self._state._replace(user_agent=agent or '')

    def authenticate(self, token):
        self._state = self._state._replace(token=token or None)

    def invalidate(self):
        self._state = self._state._replace(token=None)

    def snapshot(self):
        return self._state

    def require_user_agent(self):
        state = self._state
        if not state.user_agent:
            raise PreconditionError(USER_AGENT_NOT_SET_MESSAGE)
        return state

    def require_authenticated(self):
        state = self.require_user_agent()
        if not state.token:
            raise PreconditionError(TOKEN_NOT_SET_MESSAGE)
        return state

    def __repr__(self):
        return f"Session(user_agent={self.user_agent!r}, authenticated={self.is_authenticated})"
