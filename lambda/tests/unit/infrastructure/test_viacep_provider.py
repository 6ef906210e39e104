"""
Unit Tests: ViaCEP Provider
"""
import asyncio

import aiohttp
import pytest

from domain.entities.location import Location
from domain.exceptions import CepNotFoundException, UpstreamTransportException
from infrastructure.adapters.output.providers.viacep import ViaCepProvider


@pytest.fixture
def viacep_payload():
    """Resposta real (resumida) do ViaCEP para 01001-000"""
    return {
        "cep": "01001-000",
        "logradouro": "Praça da Sé",
        "bairro": "Sé",
        "localidade": "São Paulo",
        "uf": "SP",
        "ibge": "3550308"
    }


def build_provider(session_manager):
    return ViaCepProvider(session_manager=session_manager, base_url="https://viacep.com.br/ws/")


class TestViaCepProvider:
    """Test suite for ViaCepProvider"""
    
    def test_build_url(self, make_session_manager):
        provider = build_provider(make_session_manager())
        
        assert provider.build_url("01001000") == "https://viacep.com.br/ws/01001000/json/"
        assert provider.provider_name == "ViaCEP"
    
    @pytest.mark.asyncio
    async def test_get_location_success(self, make_response, make_session_manager, viacep_payload):
        session_manager = make_session_manager(make_response(status=200, payload=viacep_payload))
        provider = build_provider(session_manager)
        
        location = await provider.get_location("01001000")
        
        assert location == Location(city="São Paulo")
        session_manager.mock_session.get.assert_called_once_with("https://viacep.com.br/ws/01001000/json/")
        assert session_manager.opened == 1
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("erro", [True, "true"])
    async def test_erro_marker_is_not_found(self, make_response, make_session_manager, erro):
        """ViaCEP responde 200 com {"erro": true} para CEP inexistente"""
        provider = build_provider(make_session_manager(make_response(status=200, payload={"erro": erro})))
        
        with pytest.raises(CepNotFoundException) as exc_info:
            await provider.get_location("00000000")
        
        assert exc_info.value.details == {"cep": "00000000"}
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"cep": "01001-000"},
        {"localidade": ""},
        {"localidade": "   "},
        {"localidade": None},
        {"localidade": 123},
        ["São Paulo"],
        None,
    ])
    async def test_missing_locality_is_not_found(self, make_response, make_session_manager, payload):
        provider = build_provider(make_session_manager(make_response(status=200, payload=payload)))
        
        with pytest.raises(CepNotFoundException):
            await provider.get_location("01001000")
    
    @pytest.mark.asyncio
    async def test_unparsable_json_is_not_found(self, make_response, make_session_manager):
        response = make_response(status=200, json_error=ValueError("Expecting value"))
        provider = build_provider(make_session_manager(response))
        
        with pytest.raises(CepNotFoundException):
            await provider.get_location("01001000")
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_non_2xx_is_not_found(self, make_response, make_session_manager, status):
        response = make_response(status=status)
        provider = build_provider(make_session_manager(response))
        
        with pytest.raises(CepNotFoundException):
            await provider.get_location("01001000")
        
        response.json.assert_not_called()
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        aiohttp.ClientConnectionError("Cannot connect to host viacep.com.br:443"),
        asyncio.TimeoutError(),
    ])
    async def test_transport_error(self, make_session_manager, error):
        provider = build_provider(make_session_manager(error=error))
        
        with pytest.raises(UpstreamTransportException) as exc_info:
            await provider.get_location("01001000")
        
        assert str(exc_info.value) == "upstream service unavailable"
        assert exc_info.value.__cause__ is error
    
    @pytest.mark.asyncio
    async def test_strips_locality(self, make_response, make_session_manager):
        provider = build_provider(make_session_manager(make_response(payload={"localidade": " Recife "})))
        
        location = await provider.get_location("50030230")
        
        assert location.city == "Recife"
