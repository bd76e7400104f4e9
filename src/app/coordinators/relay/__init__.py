"""Coordenação do consumo da fila de relay."""

from .delivery_worker import RelayDeliveryWorker

__all__ = ["RelayDeliveryWorker"]
