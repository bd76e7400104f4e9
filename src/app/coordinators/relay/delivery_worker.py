"""Worker de entrega: consome a fila de relay e retransmite cada mensagem.

Roda como task asyncio durante toda a vida do processo. Mensagens são
entregues uma por vez, na ordem de publicação. Falhas de entrega são logadas e a
mensagem é descartada, sem redelivery. Se a conexão de inscrição cair, o
worker descarta a inscrição, espera um intervalo fixo e se inscreve de novo;
mensagens publicadas nesse intervalo são perdidas.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from app.protocols.relay_queue import RelaySubscriberProtocol
    from app.use_cases.relay import DeliverRelayMessageUseCase

logger = logging.getLogger(__name__)

# Pausa entre a queda da inscrição e a nova tentativa
DEFAULT_RESUBSCRIBE_DELAY_SECONDS = 1.0


class RelayDeliveryWorker:
    """Assinante único do canal de relay."""

    def __init__(
        self,
        subscriber: RelaySubscriberProtocol,
        deliver: DeliverRelayMessageUseCase,
        *,
        resubscribe_delay_seconds: float = DEFAULT_RESUBSCRIBE_DELAY_SECONDS,
    ) -> None:
        self._subscriber = subscriber
        self._deliver = deliver
        self._resubscribe_delay = resubscribe_delay_seconds
        self._task: asyncio.Task[None] | None = None
        self.delivered = 0
        self.failed = 0
        self.subscription_losses = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Inscreve no canal e agenda o loop de consumo.

        A inscrição acontece antes de retornar, para que mensagens publicadas
        logo após o startup já tenham assinante.
        """
        if self.running:
            return
        await self._subscriber.subscribe()
        self._task = asyncio.create_task(self._run(), name="relay-delivery-worker")
        self._task.add_done_callback(self._on_task_done)
        logger.info("delivery_worker_started")

    async def stop(self) -> None:
        """Cancela o loop e fecha a inscrição.

        Uma mensagem em processamento no momento do cancelamento é perdida.
        """
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        await self._subscriber.close()
        logger.info(
            "delivery_worker_stopped",
            extra={"delivered": self.delivered, "failed": self.failed},
        )

    async def _run(self) -> None:
        """Consome até o cancelamento; queda da inscrição não encerra o loop."""
        while True:
            try:
                async for message in self._subscriber.messages():
                    await self.handle(message)
                return
            except InfrastructureError as exc:
                self.subscription_losses += 1
                logger.error(
                    "relay_queue_subscription_lost",
                    extra={
                        "error_type": type(exc).__name__,
                        "retry_in_seconds": self._resubscribe_delay,
                    },
                )
            await self._subscriber.reset()
            await asyncio.sleep(self._resubscribe_delay)

    async def handle(self, message: str) -> None:
        """Entrega uma mensagem; nenhuma exceção escapa para o loop."""
        try:
            result = await self._deliver.execute(message)
        except Exception:
            self.failed += 1
            logger.exception("delivery_unexpected_error", extra={"message_size": len(message)})
            return

        if result.ok:
            self.delivered += 1
        else:
            self.failed += 1

    @staticmethod
    def _on_task_done(task: asyncio.Task[None]) -> None:
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "delivery_worker_crashed",
                    extra={"error_type": type(exc).__name__},
                )
