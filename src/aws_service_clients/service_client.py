"""
Base client shared by every service.

Subclasses only declare a ServiceModel; the synchronous, callable and async
method variants of each operation are installed when the subclass is created.
"""
import logging
import re
import time
import uuid
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Mapping, Optional, Type, Union

import requests
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import NoCredentialsError

from .config import ClientConfiguration
from .endpoint_provider import EndpointProvider, compute_signer_region
from .error_handler import (
    AWSError,
    EndpointResolutionError,
    ErrorMarshaller,
    SigningError,
    build_service_errors,
    invalid_parameter_error,
    missing_parameter_error,
)
from .http_client import HttpClient
from .logging_config import log_api_request, log_api_response, log_client_event, log_performance, log_retry_event
from .model import Operation, ServiceModel, ServiceRequest, build_request_class
from .outcome import Outcome
from .parsers import ResponseParseError, parse_response
from .request_signer import RequestSigner, SigningConfig
from .retry_strategy import RetryStrategy
from .serializers import create_serializer

logger = logging.getLogger(__name__)

ACCOUNT_ID_PATTERN = re.compile(r'[0-9]{12}')

AsyncHandler = Callable[["ServiceClient", ServiceRequest, Outcome, Optional["AsyncCallerContext"]], None]


class AsyncCallerContext:
    """Opaque caller context handed back to async completion handlers."""

    def __init__(self, uuid_: Optional[str] = None):
        self.uuid = uuid_ or str(uuid.uuid4())

    def __repr__(self) -> str:
        return f"AsyncCallerContext({self.uuid!r})"


def _create_api_methods(model: ServiceModel, operation: Operation) -> Dict[str, Callable]:
    py_name = operation.method_name
    summary = f"{model.service_id} {operation.name} ({operation.http_method} {operation.path})"
    required = ", ".join(operation.required) or "none"

    def _api_call(self, request: Optional[ServiceRequest] = None, **members) -> Outcome:
        return self.make_request(operation, self._build_request(operation, request, members))

    def _api_callable(self, request: Optional[ServiceRequest] = None, **members) -> Future:
        built = self._build_request(operation, request, members)
        return self._submit(self.make_request, operation, built)

    def _api_async(
        self,
        request: ServiceRequest,
        handler: AsyncHandler,
        context: Optional[AsyncCallerContext] = None
    ) -> None:
        built = self._build_request(operation, request, {})

        def _task():
            handler(self, built, self.make_request(operation, built), context)

        self._submit(_task)

    _api_call.__name__ = py_name
    _api_call.__doc__ = f"Call {summary}.\n\nRequired members: {required}\n\nReturns:\n    Outcome"
    _api_callable.__name__ = f"{py_name}_callable"
    _api_callable.__doc__ = f"Submit {summary} to the executor.\n\nReturns:\n    Future resolving to an Outcome"
    _api_async.__name__ = f"{py_name}_async"
    _api_async.__doc__ = (
        f"Run {summary} on the executor and call handler(client, request, outcome, context)."
    )

    return {
        py_name: _api_call,
        f"{py_name}_callable": _api_callable,
        f"{py_name}_async": _api_async,
    }


class ServiceClient:
    """
    Signed HTTP client for one AWS service.

    Operations never raise for service, transport, endpoint or validation
    failures; they return an Outcome holding either a ServiceResult or an
    AWSError.
    """

    model: Optional[ServiceModel] = None
    errors: Optional[Type] = None
    request_classes: Dict[str, Type[ServiceRequest]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        model = cls.__dict__.get("model")
        if model is None:
            return

        if "errors" not in cls.__dict__:
            cls.errors = build_service_errors(f"{cls.__name__[:-len('Client')]}Errors", model.errors)
        cls.request_classes = {op.name: build_request_class(model, op, cls.__module__) for op in model.operations}

        for operation in model.operations:
            for name, method in _create_api_methods(model, operation).items():
                setattr(cls, name, method)

    def __init__(
        self,
        config: Union[ClientConfiguration, Mapping[str, Any], None] = None,
        credentials: Optional[Credentials] = None,
        credentials_provider: Optional[Callable[[], Optional[Credentials]]] = None,
        endpoint_provider: Optional[EndpointProvider] = None,
        http_client: Optional[HttpClient] = None,
        executor: Optional[Executor] = None,
    ):
        if self.model is None:
            raise TypeError(f"{type(self).__name__} does not declare a service model")

        if config is None:
            config = ClientConfiguration()
        elif not isinstance(config, ClientConfiguration):
            config = ClientConfiguration.from_dict(dict(config))
        self.config = config

        self._signing_config = SigningConfig(config.signing)
        self._signer = RequestSigner(self._signing_config, credentials or credentials_provider)
        self._signer_name = self._signing_config.signer_for(self.model.signing_name)

        self._endpoint_provider = endpoint_provider or EndpointProvider(self.model.endpoint_prefix)
        self._endpoint_provider.init_built_in_parameters(config)

        self._owns_http_client = http_client is None
        self._http_client = http_client or HttpClient.from_config(config)

        executor = executor or config.executor
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=config.executor_max_workers,
            thread_name_prefix=f"{self.model.endpoint_prefix}-client",
        )

        self._retry_strategy = RetryStrategy.from_config(config)
        self._marshaller = ErrorMarshaller(self.errors, self.model.errors)
        self._serializer = create_serializer(self.model)
        self._closed = False

        log_client_event("client_created", {
            "service": self.model.service_id,
            "region": config.region,
            "signer": self._signer_name,
        })

    @property
    def service_name(self) -> str:
        return self.model.signing_name

    @property
    def endpoint_provider(self) -> EndpointProvider:
        return self._endpoint_provider

    @property
    def retry_strategy(self) -> RetryStrategy:
        return self._retry_strategy

    @property
    def signing_region(self) -> str:
        return compute_signer_region(self.config.region)

    def override_endpoint(self, endpoint: str) -> None:
        """Send every subsequent request to the given base URL."""
        self._endpoint_provider.override_endpoint(endpoint)
        log_client_event("endpoint_overridden", {"service": self.model.service_id, "endpoint": endpoint})

    def request_class(self, operation_name: str) -> Type[ServiceRequest]:
        return self.request_classes[self.model.operation(operation_name).name]

    def new_request(self, operation_name: str, **members) -> ServiceRequest:
        return self.request_class(operation_name)(**members)

    def _build_request(self, operation: Operation, request: Optional[ServiceRequest], members: Dict[str, Any]) -> ServiceRequest:
        if request is None:
            return self.request_classes[operation.name](**members)
        if not isinstance(request, ServiceRequest):
            raise TypeError(f"{operation.method_name}() expects a ServiceRequest, got {type(request).__name__}")
        if members:
            return request.copy().set(**members)
        return request

    def _submit(self, fn: Callable, *args) -> Future:
        if self._closed:
            raise RuntimeError(f"{type(self).__name__} is closed")
        future = self._executor.submit(fn, *args)
        future.add_done_callback(self._log_task_failure)
        return future

    @staticmethod
    def _log_task_failure(future: Future):
        if not future.cancelled() and future.exception() is not None:
            logger.error(f"Asynchronous operation failed: {future.exception()!r}")

    def execute(self, operation_name: str, request: Optional[ServiceRequest] = None, **members) -> Outcome:
        """Run an operation by API or method name."""
        operation = self.model.operation(operation_name)
        return self.make_request(operation, self._build_request(operation, request, members))

    def make_request(self, operation: Union[Operation, str], request: ServiceRequest) -> Outcome:
        """
        Validate, serialise, sign and send one operation call.

        Args:
            operation: Operation model or its name
            request: Request members

        Returns:
            Outcome with a ServiceResult or an AWSError
        """
        if not isinstance(operation, Operation):
            operation = self.model.operation(operation)

        for member in operation.required:
            if not request.is_set(member):
                logger.error(f"{operation.name}: Required field: {member}, is not set")
                return Outcome(error=missing_parameter_error(self.errors, member))

        if operation.validate_account_id and not ACCOUNT_ID_PATTERN.fullmatch(str(request.get("AccountId"))):
            logger.error(f"{operation.name}: Required field: AccountId has invalid value")
            return Outcome(error=invalid_parameter_error(self.errors, "AccountId"))

        try:
            endpoint = self._endpoint_provider.resolve_endpoint()
        except EndpointResolutionError as e:
            logger.error(f"{operation.name}: {e.message}")
            return Outcome(error=AWSError(self.errors.ENDPOINT_RESOLUTION_FAILURE, "ENDPOINT_RESOLUTION_FAILURE", e.message, False))

        if operation.host_prefix:
            prefix_error = endpoint.add_prefix_if_missing(operation.host_prefix)
            if prefix_error:
                logger.error(f"{operation.name}: {prefix_error}")
                return Outcome(error=AWSError(self.errors.VALIDATION, "INVALID_HOST_PREFIX", prefix_error, False))

        try:
            headers, body = self._serializer.serialize(operation, request, endpoint)
        except (TypeError, ValueError) as e:
            logger.error(f"{operation.name}: failed to serialize request: {e}")
            return Outcome(error=AWSError(self.errors.INVALID_PARAMETER_VALUE, "SERIALIZATION_ERROR", str(e), False))

        headers = self.customize_request(operation, request, headers, body)

        start = time.time()
        outcome = self._send_with_retries(operation, endpoint.url, headers, body)
        duration_ms = (time.time() - start) * 1000
        log_performance(f"{self.model.service_id}.{operation.name}", duration_ms, success=outcome.is_success)
        return outcome

    def customize_request(
        self,
        operation: Operation,
        request: ServiceRequest,
        headers: Dict[str, str],
        body: Optional[bytes]
    ) -> Dict[str, str]:
        """Hook for service specific headers; returns the headers to send."""
        return headers

    def _send_with_retries(self, operation: Operation, url: str, headers: Dict[str, str], body: Optional[bytes]) -> Outcome:
        retries = 0
        while True:
            outcome = self._attempt(operation, url, headers, body, retries + 1)
            if outcome.is_success or not self._retry_strategy.should_retry(outcome.error, retries):
                return outcome

            delay_ms = self._retry_strategy.delay_before_next_retry_ms(outcome.error, retries)
            log_retry_event(self.model.service_id, operation.name, retries + 1, delay_ms, outcome.error)
            if delay_ms:
                time.sleep(delay_ms / 1000.0)
            retries += 1

    def _attempt(self, operation: Operation, url: str, headers: Dict[str, str], body: Optional[bytes], attempt: int) -> Outcome:
        aws_request = AWSRequest(method=operation.http_method, url=url, headers=dict(headers), data=body or b"")
        try:
            self._signer.sign_request(aws_request, self.model.signing_name, self.signing_region, self._signer_name)
        except NoCredentialsError as e:
            logger.error(f"{operation.name}: {e}")
            return Outcome(error=AWSError(self.errors.MISSING_AUTHENTICATION_TOKEN, "MissingAuthenticationToken", str(e), False))
        except SigningError as e:
            logger.error(f"{operation.name}: {e.message}")
            return Outcome(error=AWSError(self.errors.CLIENT_SIGNING_FAILURE, "CLIENT_SIGNING_FAILURE", e.message, False))

        prepared = aws_request.prepare()
        log_api_request(self.model.service_id, operation.name, prepared.method, prepared.url, attempt)

        start = time.time()
        try:
            response = self._http_client.send(prepared.method, prepared.url, dict(prepared.headers.items()), prepared.body)
        except requests.RequestException as e:
            logger.warning(f"{operation.name}: transport failure on attempt {attempt}: {e}")
            return Outcome(error=self._marshaller.network_error(e))

        duration_ms = (time.time() - start) * 1000
        request_id = response.headers.get("x-amzn-RequestId") or response.headers.get("x-amz-request-id")
        log_api_response(self.model.service_id, operation.name, response.status_code, duration_ms, request_id)

        if not response.ok:
            return Outcome(error=self._marshaller.marshall(response.status_code, response.headers, response.body))

        try:
            return Outcome(result=parse_response(operation, response))
        except ResponseParseError as e:
            logger.error(f"{operation.name}: {e}")
            return Outcome(error=AWSError(
                self.errors.UNKNOWN, "ResponseParseError", str(e), False,
                response_code=response.status_code, request_id=request_id,
            ))

    def close(self):
        """Shut down the executor and HTTP session owned by this client."""
        if self._closed:
            return
        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        if self._owns_http_client:
            self._http_client.close()
        log_client_event("client_closed", {"service": self.model.service_id})

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(region={self.config.region!r})"
