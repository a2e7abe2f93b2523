"""
Aiohttp Session Manager - Singleton para gerenciar sessão HTTP global
Reutiliza a sessão dentro do mesmo event loop
"""
import asyncio
from typing import Optional
import aiohttp

from domain.constants import API
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador singleton de sessão aiohttp

    - Reutiliza sessão enquanto o event loop for o mesmo
    - Recria sessão automaticamente quando o loop muda (asyncio.run cria novos loops)
    - Sem override de timeout: vale o default do aiohttp

    Uso:
        manager = AiohttpSessionManager.get_instance()
        session = await manager.get_session()
        async with session.get(url) as response:
            data = await response.json()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(
        self,
        limit: int = API.HTTP_CONNECTION_LIMIT,
        limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST,
        ttl_dns_cache: int = API.DNS_CACHE_TTL
    ):
        """
        Args:
            limit: Limite total de conexões no pool
            limit_per_host: Limite de conexões por host
            ttl_dns_cache: TTL do cache DNS em segundos
        """
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    @classmethod
    def get_instance(
        cls,
        limit: int = API.HTTP_CONNECTION_LIMIT,
        limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST,
        ttl_dns_cache: int = API.DNS_CACHE_TTL
    ) -> 'AiohttpSessionManager':
        """
        Retorna instância singleton do gerenciador
        (parâmetros usados apenas na primeira criação)
        """
        if cls._instance is None:
            cls._instance = cls(
                limit=limit,
                limit_per_host=limit_per_host,
                ttl_dns_cache=ttl_dns_cache
            )
            logger.info("AiohttpSessionManager singleton created", limit=limit)

        return cls._instance

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Returns:
            Sessão aiohttp vinculada ao event loop atual
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None and
                not self._session.closed and
                self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self._close_session()

        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(connector=connector)
        self._session_loop_id = current_loop_id

        logger.info("Aiohttp session created", loop_id=current_loop_id)
        return self._session

    async def _close_session(self) -> None:
        """Fecha sessão aiohttp existente"""
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
            finally:
                self._session = None
                self._session_loop_id = None

    async def cleanup(self) -> None:
        """
        Cleanup completo - fecha sessão e libera recursos
        Deve ser chamado no encerramento da aplicação
        """
        await self._close_session()
        logger.info("AiohttpSessionManager cleanup completed")

    @classmethod
    def reset_instance(cls) -> None:
        """
        Reset singleton instance (útil para testes)
        Cleanup deve ser feito antes do reset
        """
        cls._instance = None


def get_aiohttp_session_manager(
    limit: int = API.HTTP_CONNECTION_LIMIT,
    limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST,
    ttl_dns_cache: int = API.DNS_CACHE_TTL
) -> AiohttpSessionManager:
    """
    Factory function para obter instância singleton do gerenciador
    """
    return AiohttpSessionManager.get_instance(
        limit=limit,
        limit_per_host=limit_per_host,
        ttl_dns_cache=ttl_dns_cache
    )
