from .monitoring_service import MonitoringService, configure_logging

__all__ = ['MonitoringService', 'configure_logging']
