from pysolaredge.monitoring.pysolaredge_monitoring import PySolarEdgeMonitoring, MONITORING_URL
