"""
Fixtures para adapters HTTP (aiohttp mockado, sem rede)
"""
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest


class FakeSessionManager:
    """Substitui AiohttpSessionManager entregando uma sessão mockada"""
    def __init__(self, session):
        self.mock_session = session
        self.opened = 0

    @asynccontextmanager
    async def session(self):
        self.opened += 1
        yield self.mock_session


@pytest.fixture
def make_response():
    """
    Factory fixture para respostas aiohttp mockadas
    
    Usage:
        response = make_response(status=200, payload={"localidade": "São Paulo"})
    """
    def _make(status=200, payload=None, json_error=None, text='', headers=None):
        response = MagicMock()
        response.status = status
        response.headers = headers if headers is not None else {'Content-Type': 'application/json'}
        if json_error is not None:
            response.json = AsyncMock(side_effect=json_error)
        else:
            response.json = AsyncMock(return_value=payload)
        response.text = AsyncMock(return_value=text)
        response.__aenter__ = AsyncMock(return_value=response)
        response.__aexit__ = AsyncMock(return_value=False)
        return response

    return _make


@pytest.fixture
def make_session_manager():
    """
    Factory fixture: session manager cuja sessão devolve `response`
    em get/post ou levanta `error`
    """
    def _make(response=None, error=None):
        session = MagicMock()
        if error is not None:
            session.get = MagicMock(side_effect=error)
            session.post = MagicMock(side_effect=error)
        else:
            session.get = MagicMock(return_value=response)
            session.post = MagicMock(return_value=response)
        return FakeSessionManager(session)

    return _make
