"""
Dispatch Engine

Architectural Intent:
- Single algorithm that turns a message into a remote lifecycle call for any
  resource kind, parameterized by a ResourceDescriptor
- Reads the operation header, materializes the request (from the body or
  from headers), invokes the service, writes the result back to the body
- Every failure ends as exactly one fault on the message; process() always
  returns normally and never retries

Design Decisions:
- Stateless and reentrant: one engine can serve every producer on every
  thread, provided the client facade is thread-safe
- Headers are only read; the body and fault flag are the only outputs
- Exceptions escaping the client facade are remote failures; their text is
  written to the body verbatim
- The engine never invents ids: a create or update result without one is an
  invariant violation

Fault messages:
    unsupported operation: <value>
    operation <op> not supported for <kind>
    missing header <X> for <operation> on <kind>
    missing id header
    not found: <id>
    <code>: <message>             (failed delete)
    create returned no ID
"""

import logging
import time
from typing import Any, Callable, Optional

from cloudlink.application.resource_descriptor import ResourceDescriptor
from cloudlink.domain import constants
from cloudlink.domain.exceptions import (
    BodyTypeError,
    CallerError,
    InvariantViolationError,
    MissingIdHeaderError,
    OperationNotSupportedError,
    RemoteFailureError,
    ResourceNotFoundError,
    UnsupportedOperationError,
)
from cloudlink.domain.ports.cloud_client_port import CloudClientPort
from cloudlink.domain.ports.message_port import MessagePort
from cloudlink.domain.ports.telemetry_port import TelemetryPort
from cloudlink.domain.value_objects.operation import Operation

logger = logging.getLogger(__name__)

Handler = Callable[[MessagePort, ResourceDescriptor, Any], None]


class DispatchEngine:
    def __init__(self, telemetry: Optional[TelemetryPort] = None) -> None:
        self.telemetry = telemetry
        self._handlers: dict[Operation, Handler] = {
            Operation.CREATE: self._create,
            Operation.GET: self._get,
            Operation.GET_ALL: self._get_all,
            Operation.UPDATE: self._update,
            Operation.DELETE: self._delete,
        }

    def process(
        self,
        message: MessagePort,
        descriptor: ResourceDescriptor,
        client: CloudClientPort,
    ) -> None:
        """Dispatch one message against the descriptor's service."""
        started = time.monotonic()
        raw_operation = message.headers.get(constants.OPERATION)
        span = None
        if self.telemetry is not None:
            span = self.telemetry.start_span(
                f"cloudlink.{descriptor.kind}.{raw_operation}",
                {"kind": str(descriptor.kind), "operation": str(raw_operation)},
            )

        try:
            operation = self._decode_operation(raw_operation, descriptor)
            service = descriptor.service_accessor(client)
            logger.debug(
                "Dispatching %s on %s (message headers=%s)",
                operation,
                descriptor.kind,
                sorted(message.headers),
            )
            self._handlers[operation](message, descriptor, service)
            message.set_fault(False)
        except CallerError as e:
            logger.warning("Rejected %s message: %s", descriptor.kind, e)
            self._fault(message, str(e))
        except ResourceNotFoundError as e:
            logger.warning("%s lookup failed: %s", descriptor.kind, e)
            self._fault(message, str(e))
        except RemoteFailureError as e:
            logger.warning("Remote %s call failed: %s", descriptor.kind, e)
            self._fault(message, str(e))
        except InvariantViolationError as e:
            logger.error("Invariant violated by %s service: %s", descriptor.kind, e)
            self._fault(message, str(e))
        except Exception as e:
            logger.warning(
                "Remote %s call raised %s: %s", descriptor.kind, type(e).__name__, e
            )
            self._fault(message, str(e) or type(e).__name__)
        finally:
            if self.telemetry is not None:
                self.telemetry.record_dispatch(
                    str(descriptor.kind),
                    str(raw_operation),
                    message.fault,
                    (time.monotonic() - started) * 1000.0,
                )
                self.telemetry.end_span(span)

    # ------------------------------------------------------------------
    # Operation handlers
    # ------------------------------------------------------------------

    def _create(
        self, message: MessagePort, descriptor: ResourceDescriptor, service: Any
    ) -> None:
        if descriptor.create_handler is not None:
            result = descriptor.create_handler(service, message)
        else:
            request = message.body()
            if not isinstance(request, descriptor.resource_type):
                if descriptor.builder is None:
                    raise OperationNotSupportedError(Operation.CREATE, descriptor.kind)
                request = descriptor.builder(message.headers)
            result = service.create(request)

        if result is None or not getattr(result, "id", None):
            raise InvariantViolationError("create returned no ID")
        message.set_body(result)

    def _get(
        self, message: MessagePort, descriptor: ResourceDescriptor, service: Any
    ) -> None:
        resource_id = self._resolve_id(message, descriptor)
        result = service.get(resource_id)
        if result is None:
            raise ResourceNotFoundError(resource_id)
        message.set_body(result)

    def _get_all(
        self, message: MessagePort, descriptor: ResourceDescriptor, service: Any
    ) -> None:
        result = service.list()
        message.set_body(list(result) if result is not None else [])

    def _update(
        self, message: MessagePort, descriptor: ResourceDescriptor, service: Any
    ) -> None:
        resource = message.body_as(descriptor.resource_type).unwrap()
        if not resource.has_id:
            raise BodyTypeError(
                f"{descriptor.resource_type.__name__} with an id", resource
            )
        result = service.update(resource)
        if result is None or not getattr(result, "id", None):
            raise InvariantViolationError("update returned no ID")
        message.set_body(result)

    def _delete(
        self, message: MessagePort, descriptor: ResourceDescriptor, service: Any
    ) -> None:
        resource_id = self._resolve_id(message, descriptor)
        response = service.delete(resource_id)
        if response is None:
            raise InvariantViolationError("delete returned no response")
        if not response.success:
            raise RemoteFailureError(response.message or "", response.code)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _decode_operation(raw: Any, descriptor: ResourceDescriptor) -> Operation:
        operation = Operation.decode(raw)
        if operation is None:
            raise UnsupportedOperationError(raw)
        if not descriptor.supports(operation):
            raise OperationNotSupportedError(operation, descriptor.kind)
        return operation

    @staticmethod
    def _resolve_id(message: MessagePort, descriptor: ResourceDescriptor) -> str:
        for name in descriptor.id_headers:
            value = message.header(name, str).unwrap()
            if value:
                return value
        raise MissingIdHeaderError()

    @staticmethod
    def _fault(message: MessagePort, diagnostic: str) -> None:
        message.set_fault(True)
        message.set_body(diagnostic)
