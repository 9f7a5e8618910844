"""
Dependency Injection Container

Lightweight container that owns the application-wide singletons (query
cache, confirmation gate, modal host, ...) for the lifetime of the window
and disposes them in reverse registration order on shutdown.
"""

import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar
from enum import Enum
import threading

T = TypeVar('T')


class ServiceLifetime(Enum):
    """Service lifetime management options"""
    SINGLETON = "singleton"
    TRANSIENT = "transient"


class ServiceDescriptor:
    """Describes how a service should be created and managed"""

    def __init__(self,
                 service_type: Type[T],
                 factory: Optional[Callable[..., T]] = None,
                 lifetime: ServiceLifetime = ServiceLifetime.SINGLETON):
        self.service_type = service_type
        self.factory = factory
        self.lifetime = lifetime
        self.instance = None
        self._lock = threading.Lock()


class DependencyInjectionContainer:
    """Resolves registered services by type"""

    def __init__(self):
        self._services: Dict[Type, ServiceDescriptor] = {}
        self._lock = threading.RLock()
        self._disposing = False

    def register_factory(self,
                         service_type: Type[T],
                         factory: Callable[["DependencyInjectionContainer"], T],
                         lifetime: ServiceLifetime = ServiceLifetime.SINGLETON) -> 'DependencyInjectionContainer':
        """Register a service with a factory method; the factory receives the container"""
        with self._lock:
            self._check_not_disposing()
            self._services[service_type] = ServiceDescriptor(service_type, factory=factory, lifetime=lifetime)
            logging.debug(f"Registered {service_type.__name__} factory as {lifetime.value}")
            return self

    def register_instance(self, service_type: Type[T], instance: T) -> 'DependencyInjectionContainer':
        """Register an existing instance as a singleton"""
        with self._lock:
            self._check_not_disposing()
            descriptor = ServiceDescriptor(service_type, lifetime=ServiceLifetime.SINGLETON)
            descriptor.instance = instance
            self._services[service_type] = descriptor
            logging.debug(f"Registered {service_type.__name__} instance as singleton")
            return self

    def get_service(self, service_type: Type[T]) -> T:
        """Get a service instance from the container"""
        if self._disposing:
            raise RuntimeError("Cannot get services while disposing")

        descriptor = self._services.get(service_type)
        if descriptor is None:
            raise ValueError(f"Service {service_type.__name__} is not registered")

        if descriptor.lifetime == ServiceLifetime.TRANSIENT:
            return self._create_instance(descriptor)

        if descriptor.instance is None:
            with descriptor._lock:
                if descriptor.instance is None:
                    descriptor.instance = self._create_instance(descriptor)
        return descriptor.instance

    def _create_instance(self, descriptor: ServiceDescriptor) -> Any:
        try:
            return descriptor.factory(self)
        except Exception as e:
            logging.error(f"Failed to create instance of {descriptor.service_type.__name__}: {e}")
            raise

    def is_registered(self, service_type: Type) -> bool:
        return service_type in self._services

    def dispose(self):
        """Dispose all created singletons, most recently registered first"""
        with self._lock:
            if self._disposing:
                return
            self._disposing = True

            for descriptor in reversed(list(self._services.values())):
                instance = descriptor.instance
                if instance is not None and hasattr(instance, 'dispose'):
                    try:
                        instance.dispose()
                    except Exception as e:
                        logging.error(f"Error disposing {descriptor.service_type.__name__}: {e}")

            self._services.clear()
            logging.info("Dependency injection container disposed")

    def _check_not_disposing(self):
        if self._disposing:
            raise RuntimeError("Cannot register services while disposing")
