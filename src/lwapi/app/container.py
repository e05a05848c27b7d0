from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..core.ports.clock_port import SystemClock
from ..core.usecases.list_alerts import ListAlertsUseCase
from ..core.usecases.list_machine_details import ListMachineDetailsUseCase
from ..core.usecases.search_container_vulnerabilities import SearchContainerVulnerabilitiesUseCase
from ..core.usecases.search_inventory import SearchInventoryUseCase
from ..infra.alerts_adapter import AlertsAdapter
from ..infra.entities_adapter import EntitiesAdapter
from ..infra.http_client import HttpClient
from ..infra.inventory_adapter import InventoryAdapter
from ..infra.vulnerabilities_adapter import ContainerVulnerabilitiesAdapter

logger = logging.getLogger(__name__)


def http_client_resource(
	account,
	base_url,
	api_key,
	api_secret,
	api_token,
	subaccount,
	org_access,
	timeout_seconds,
	token_expiry_seconds,
):
	"""Create the HTTP client as a resource with proper cleanup."""
	logger.info(f"Initializing API client for: {base_url or account}")
	if not api_token and not (api_key and api_secret):
		logger.warning("No access token or API keys configured - requests will fail to authenticate")

	with HttpClient(
		account,
		base_url=base_url,
		api_key=api_key,
		api_secret=api_secret,
		token=api_token,
		subaccount=subaccount,
		org_access=bool(org_access),
		timeout_seconds=timeout_seconds,
		token_expiry_seconds=token_expiry_seconds,
	) as client:
		yield client
	logger.debug("API client closed")


class Container(containers.DeclarativeContainer):
	# filled from AppConfig when a client or CLI command starts, not at import
	config = providers.Configuration()

	clock = providers.Singleton(SystemClock)

	http_client = providers.Resource(
		http_client_resource,
		account=config.account,
		base_url=config.base_url,
		api_key=config.api_key,
		api_secret=config.api_secret,
		api_token=config.api_token,
		subaccount=config.subaccount,
		org_access=config.org_access,
		timeout_seconds=config.timeout_seconds,
		token_expiry_seconds=config.token_expiry_seconds,
	)

	alerts = providers.Factory(AlertsAdapter, http_client=http_client)
	entities = providers.Factory(EntitiesAdapter, http_client=http_client)
	inventory = providers.Factory(InventoryAdapter, http_client=http_client)
	container_vulnerabilities = providers.Factory(ContainerVulnerabilitiesAdapter, http_client=http_client)

	list_alerts_uc = providers.Factory(ListAlertsUseCase, alerts=alerts, requester=http_client, clock=clock)
	list_machines_uc = providers.Factory(
		ListMachineDetailsUseCase, entities=entities, requester=http_client, clock=clock
	)
	search_inventory_uc = providers.Factory(
		SearchInventoryUseCase,
		inventory=inventory,
		requester=http_client,
		clock=clock,
		window_size_days=config.max_search_window_days,
		max_history_days=config.max_search_history_days,
	)
	search_vulnerabilities_uc = providers.Factory(
		SearchContainerVulnerabilitiesUseCase,
		vulnerabilities=container_vulnerabilities,
		requester=http_client,
		clock=clock,
	)
