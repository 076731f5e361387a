"""Use cases: processamento inbound e fan-out."""

from .fan_out import FanOutReport, FanOutUseCase
from .process_inbound import ProcessInboundUseCase, process

__all__ = [
    "FanOutReport",
    "FanOutUseCase",
    "ProcessInboundUseCase",
    "process",
]
