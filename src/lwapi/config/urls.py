from __future__ import annotations

from typing import Optional

API_PREFIX = "/api/v2/"

API_TOKENS = "access/tokens"
API_ALERTS = "Alerts"
API_ALERTS_BY_TIME = "Alerts?startTime={start}&endTime={end}"
API_ENTITIES_MACHINE_DETAILS_SEARCH = "Entities/MachineDetails/search"
API_INVENTORY_SEARCH = "Inventory/search"
API_INVENTORY_SCAN_CSP = "Inventory/scan?csp={csp}"
API_VULNERABILITIES_CONTAINERS_SEARCH = "Vulnerabilities/Containers/search"


def get_base_url(account: Optional[str], base_url: Optional[str] = None) -> str:
	"""Return the server URL for an account.

	``account`` may be a bare name (``acme``) or a full domain
	(``acme.lacework.net``); an explicit ``base_url`` wins over both.
	"""
	if base_url:
		return base_url.rstrip("/")
	if not account:
		raise ValueError("account cannot be empty")
	if ".lacework.net" in account:
		account = account.split("://")[-1].split(".")[0]
	return f"https://{account}.lacework.net"


def api_path(path: str) -> str:
	# cursor locators already carry the full /api/... path
	if path.startswith("/api/"):
		return path
	return f"{API_PREFIX}{path.lstrip('/')}"
