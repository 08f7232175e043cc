"""Orchestrators coordinating energy calculation services."""

from .energy_orchestrator import EnergyOrchestrator

__all__ = ["EnergyOrchestrator"]
