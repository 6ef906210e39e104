"""
Async Use Case: Resolve CEP Temperature
CEP -> cidade (provedor de CEP) -> temperatura atual (provedor de clima) -> 3 escalas
"""
from application.dtos.requests import CepRequest
from application.ports.input.resolve_cep_temperature_port import IResolveCepTemperatureUseCase
from application.ports.output.postal_code_provider_port import IPostalCodeProvider
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.entities.resolved_output import ResolvedOutput
from domain.value_objects.temperature import TemperatureConverter
from shared.config.logger_config import get_logger
from shared.tracing import Tracing
from shared.utils.validators import CepValidator

logger = get_logger(child=True)


class ResolveCepTemperatureUseCase(IResolveCepTemperatureUseCase):
    """Async use case: resolve the current temperature of a CEP's city"""
    
    def __init__(
        self,
        postal_code_provider: IPostalCodeProvider,
        weather_provider: IWeatherProvider,
        tracing: Tracing
    ):
        self.postal_code_provider = postal_code_provider
        self.weather_provider = weather_provider
        self.tracing = tracing
    
    async def execute(self, request: CepRequest) -> ResolvedOutput:
        """
        Execute use case asynchronously
        
        Steps are strictly sequential: the weather lookup needs the city
        resolved from the CEP, and any failure stops the pipeline.
        
        Args:
            request: CepRequest (the resolver may be called directly, so the
                CEP is validated again here)
        
        Returns:
            ResolvedOutput with city and temperature
        
        Raises:
            InvalidCepException: CEP syntax is invalid
            CepNotFoundException: CEP unknown or without locality
            WeatherUnavailableException: no current temperature for the city
            UpstreamTransportException: a provider could not be reached
        """
        cep = CepValidator.normalize(request.cep)
        
        with self.tracing.span(
            "get_location_by_cep",
            cep=cep,
            url=self.postal_code_provider.build_url(cep)
        ):
            location = await self.postal_code_provider.get_location(cep)
        
        with self.tracing.span(
            "get_weather_by_city",
            cep=cep,
            city=location.city,
            url=self.weather_provider.current_url
        ):
            reading = await self.weather_provider.get_current_weather(location.city)
        
        output = ResolvedOutput(
            city=location.city,
            weather=TemperatureConverter.convert(reading.temp_c)
        )
        
        logger.info(
            "Temperature resolved successfully",
            cep=cep,
            city=location.city,
            postal_provider=self.postal_code_provider.provider_name,
            weather_provider=self.weather_provider.provider_name
        )
        
        return output
