from pysolaredge.portal.pysolaredge_portal import PySolarEdgePortal, PORTAL_URL
