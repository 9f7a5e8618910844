"""
Application context: the window-wide services, created at startup and
disposed when the main window closes.
"""

import logging
from typing import Optional

from core.dependency_injection import DependencyInjectionContainer
from Base_Components.confirmation_gate import ConfirmationGate
from Base_Components.modal_host import ModalHost
from Services.sensei_admin_client import SenseiAdminClient
from Utils.admin_config import AdminConfig
from Utils.navigator import Navigator
from Utils.query_client import QueryClient
from Utils.thread_manager import EnhancedThreadPoolManager


class AppContext:
    """Registers and exposes the shared services of one console window"""

    def __init__(self,
                 config: AdminConfig,
                 client: Optional[SenseiAdminClient] = None,
                 thread_manager=None):
        self.container = DependencyInjectionContainer()
        self.container.register_instance(AdminConfig, config)

        if client is not None:
            self.container.register_instance(SenseiAdminClient, client)
        else:
            self.container.register_factory(SenseiAdminClient, lambda c: SenseiAdminClient(
                c.get_service(AdminConfig).get_base_url(),
                timeout=c.get_service(AdminConfig).get_request_timeout(),
            ))

        if thread_manager is not None:
            self.container.register_instance(EnhancedThreadPoolManager, thread_manager)
        else:
            self.container.register_factory(EnhancedThreadPoolManager, lambda c: EnhancedThreadPoolManager())

        self.container.register_factory(QueryClient, lambda c: QueryClient())
        self.container.register_factory(ConfirmationGate, lambda c: ConfirmationGate())
        self.container.register_factory(ModalHost, lambda c: ModalHost())
        self.container.register_factory(Navigator, lambda c: Navigator())

    @property
    def config(self) -> AdminConfig:
        return self.container.get_service(AdminConfig)

    @property
    def client(self) -> SenseiAdminClient:
        return self.container.get_service(SenseiAdminClient)

    @property
    def thread_manager(self) -> EnhancedThreadPoolManager:
        return self.container.get_service(EnhancedThreadPoolManager)

    @property
    def query_client(self) -> QueryClient:
        return self.container.get_service(QueryClient)

    @property
    def confirmation_gate(self) -> ConfirmationGate:
        return self.container.get_service(ConfirmationGate)

    @property
    def modal_host(self) -> ModalHost:
        return self.container.get_service(ModalHost)

    @property
    def navigator(self) -> Navigator:
        return self.container.get_service(Navigator)

    def dispose(self):
        logging.info("Disposing application context")
        self.container.dispose()
