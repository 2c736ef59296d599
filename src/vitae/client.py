"""Client for the remote résumé and code execution service."""

import logging
from typing import Any, NoReturn

import requests
from pydantic import ValidationError

from .config import ApiConfig
from .errors import ApiException, ClientError
from .models import CodeSample, Resume, RunRequest, RunResult

logger = logging.getLogger(__name__)


def _handle_request_exception(exception: requests.RequestException, operation: str) -> NoReturn:
    """Handle RequestException by logging and raising ApiException.

    Args:
        exception: The RequestException from requests library
        operation: Description of the operation being performed (e.g., "fetch résumé")

    Raises:
        ClientError: For HTTP 4xx responses
        ApiException: For every other failure
    """
    status_code = getattr(exception.response, "status_code", None)
    logger.error(f"Failed to {operation}: status_code={status_code or 'N/A'}")
    if status_code and 400 <= status_code < 500:
        raise ClientError(
            f"Failed to {operation} (client error: {status_code})"
        ) from exception
    raise ApiException(
        f"Failed to {operation} (status: {status_code or 'N/A'})"
    ) from exception


def _decode_json(response: requests.Response, operation: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Failed to {operation}: response is not valid JSON")
        raise ApiException(f"Failed to parse response to {operation}: {e}") from e


class ResumeClient:
    """Client for fetching the résumé and running code samples."""

    def __init__(self, config: ApiConfig):
        """Initialize the client.

        Args:
            config: ApiConfig instance with base URL, endpoint paths and timeout
        """
        self.config = config
        self.timeout = config.timeout

        logger.debug(
            f"ResumeClient initialized: base_url={config.base_url}, timeout={self.timeout}"
        )

    def get_resume(self) -> Resume:
        """Fetch the résumé.

        Raises:
            ApiException: If the request fails or the payload does not match
        """
        data = self._get(self.config.resume_path, "fetch résumé")
        try:
            return Resume.model_validate(data)
        except ValidationError as e:
            raise ApiException(f"Invalid résumé payload: {e.error_count()} error(s)") from e

    def get_code_samples(self) -> list[CodeSample]:
        """Fetch the list of code samples.

        Raises:
            ApiException: If the request fails or the payload is not a list of samples
        """
        data = self._get(self.config.samples_path, "fetch code samples")
        if not isinstance(data, list):
            raise ApiException("Invalid code samples payload: expected a list")
        try:
            samples = [CodeSample.model_validate(item) for item in data]
        except ValidationError as e:
            raise ApiException(
                f"Invalid code samples payload: {e.error_count()} error(s)"
            ) from e

        logger.info(f"Fetched {len(samples)} code sample(s)")
        return samples

    def get_code_sample(self, sample_id: str) -> CodeSample:
        """Fetch one code sample by ID.

        Raises:
            ApiException: If the sample does not exist or the request fails
        """
        for sample in self.get_code_samples():
            if sample.id == sample_id:
                return sample
        raise ApiException(f"Code sample not found: {sample_id}")

    def run_code_sample(self, sample_id: str, input: dict[str, Any]) -> RunResult:
        """Submit serialized form values for remote execution.

        Args:
            sample_id: ID of the code sample to run
            input: Payload produced by ``vitae.form.serialize``

        Returns:
            Interpreted RunResult

        Raises:
            ClientError: If the service rejects the request (4xx)
            ApiException: If the request fails or the body is not JSON
        """
        operation = f"run code sample {sample_id}"
        url = self.config.endpoint(self.config.run_path)
        payload = RunRequest(sample_id=sample_id, input=input).to_payload()

        logger.info(f"Running code sample {sample_id} with {len(input)} input field(s)")
        try:
            response = requests.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            _handle_request_exception(e, operation)

        result = RunResult.from_response(_decode_json(response, operation), response.text)
        logger.info(
            f"Code sample {sample_id} finished "
            f"({'detailed' if result.is_detailed else 'simple'} result)"
        )
        return result

    def _get(self, path: str, operation: str) -> Any:
        url = self.config.endpoint(path)
        logger.debug(f"GET {url}")
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            _handle_request_exception(e, operation)
        return _decode_json(response, operation)
