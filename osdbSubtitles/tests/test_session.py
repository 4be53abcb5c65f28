import unittest

from osdbSubtitles.lib.errors import PreconditionError, TOKEN_NOT_SET_MESSAGE, USER_AGENT_NOT_SET_MESSAGE
from osdbSubtitles.session import Session


class TestSession(unittest.TestCase):
    def test_user_agent_is_required_first(self):
        session = Session(token='abc')

        with self.assertRaises(PreconditionError) as ctx:
            session.require_authenticated()
        self.assertEqual(ctx.exception.message, USER_AGENT_NOT_SET_MESSAGE)

    def test_token_is_required_after_user_agent(self):
        session = Session(user_agent='agent v1')

        with self.assertRaises(PreconditionError) as ctx:
            session.require_authenticated()
        self.assertEqual(ctx.exception.message, TOKEN_NOT_SET_MESSAGE)

    def test_empty_token_does_not_authenticate(self):
        session = Session(user_agent='agent v1')

        session.authenticate('')
        self.assertFalse(session.is_authenticated)

        session.authenticate('tok')
        self.assertEqual(session.require_authenticated().token, 'tok')

    def test_snapshot_is_not_affected_by_later_changes(self):
        session = Session(user_agent='agent v1', token='tok')
        before = session.snapshot()

        session.invalidate()
        session.set_user_agent('agent v2')

        self.assertEqual(before, ('agent v1', 'tok'))
        self.assertIsNone(session.token)
        self.assertEqual(session.user_agent, 'agent v2')


if __name__ == '__main__':
    unittest.main()
