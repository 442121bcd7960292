from .simulation import SimulationConstants, MapDefaults, CityDefaults

__all__ = ['SimulationConstants', 'MapDefaults', 'CityDefaults']
