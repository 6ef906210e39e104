"""
Domain Constants - Constantes da aplicação centralizadas
"""


class API:
    """Constantes de APIs externas"""

    # ViaCEP
    VIACEP_BASE_URL = "https://viacep.com.br/ws"

    # WeatherAPI.com
    WEATHERAPI_BASE_URL = "https://api.weatherapi.com/v1"
    WEATHERAPI_CURRENT_PATH = "/current.json"

    # Serviço resolver (backend)
    RESOLVER_BASE_URL = "http://localhost:8081"
    RESOLVER_FORWARD_PATH = "/localizacao"

    # Timeout total por chamada externa (segundos)
    HTTP_TIMEOUT_TOTAL = 10


class Messages:
    """Mensagens de erro expostas ao cliente"""

    INVALID_INPUT = "invalid request body"
    INVALID_CEP = "invalid zipcode"
    CEP_NOT_FOUND = "can not find zipcode"
    WEATHER_UNAVAILABLE = "can not find weather data"
    UPSTREAM_UNAVAILABLE = "upstream service unavailable"


class Services:
    """Nomes de serviço (DD_SERVICE / spans)"""

    GATEWAY = "cep-gateway"
    RESOLVER = "cep-resolver"
    DEFAULT = "cep-weather"
