"""Airport adapters - Implementations of AirportRepositoryPort.

Available implementations:
- CSVAirportRepository: Loads the directory from a CSV lookup table
"""

from .csv_repository import CSVAirportRepository

__all__ = ["CSVAirportRepository"]
