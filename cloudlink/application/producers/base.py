"""
Resource Producer Base

Architectural Intent:
- Binds one resource kind to the shared DispatchEngine
- A producer holds its descriptor and the client facade; process() is the
  entry point the message bus calls
"""

from typing import Optional

from cloudlink.application.dispatch_engine import DispatchEngine
from cloudlink.application.resource_descriptor import ResourceDescriptor
from cloudlink.domain.ports.cloud_client_port import CloudClientPort
from cloudlink.domain.ports.message_port import MessagePort


class ResourceProducer:
    descriptor: ResourceDescriptor

    def __init__(
        self,
        client: CloudClientPort,
        engine: Optional[DispatchEngine] = None,
    ) -> None:
        self.client = client
        self.engine = engine or DispatchEngine()

    @property
    def kind(self):
        return self.descriptor.kind

    def process(self, message: MessagePort) -> MessagePort:
        self.engine.process(message, self.descriptor, self.client)
        return message
