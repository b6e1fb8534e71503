"""
SimpleDB Demo Runner

Drives the demo sequence against one DomainGateway:

    create domain -> list domains -> build sample records -> batch insert
    -> propagation delay -> select -> delete domain

Each step prints a human-readable line through ``echo``. The first
ServiceError ends the run; its message, status code, error code and request
id are printed and returned in the RunReport. Nothing is retried.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional

from .config import SimpleDBConfig
from .core import MAX_BATCH_ITEMS, DomainGateway
from .exceptions import ServiceError, ValidationError
from .models import DomainListing, ReplaceableItem, RunReport, StepOutcome, build_sample_records

logger = logging.getLogger(__name__)

STEP_CREATE_DOMAIN = "create_domain"
STEP_LIST_DOMAINS = "list_domains"
STEP_BUILD_RECORDS = "build_sample_records"
STEP_INSERT_RECORDS = "insert_records"
STEP_WAIT = "propagation_delay"
STEP_QUERY_DOMAIN = "query_domain"
STEP_DELETE_DOMAIN = "delete_domain"


class DemoRunner:
    """
    Orchestrates the SimpleDB demo.

    The runner owns the gateway (and through it the single boto3 client)
    for its whole lifetime. ``sleep`` and ``echo`` are injectable so the
    propagation delay and the console output can be replaced in tests.
    """

    def __init__(
        self,
        config: SimpleDBConfig,
        gateway: Optional[DomainGateway] = None,
        sleep: Callable[[float], None] = time.sleep,
        echo: Callable[[str], None] = print,
    ):
        self.config = config
        self.gateway = gateway or DomainGateway(config)
        self.sleep = sleep
        self.echo = echo

    @property
    def domain_name(self) -> str:
        return self.config.domain_name

    def create_domain(self) -> Dict[str, Any]:
        """Create the demo domain and print the service's confirmation."""
        response = self.gateway.create_domain(self.domain_name)
        self.echo(str(response))
        return response

    def list_domains(self) -> DomainListing:
        """
        List up to ``max_number_of_domains`` domains and total their items.

        Issues one DomainMetadata call per listed domain, in listing order.
        """
        response = self.gateway.list_domains(self.config.max_number_of_domains)
        domain_names: List[str] = list(response.get('DomainNames', []))

        item_counts: List[int] = []
        for name in domain_names:
            metadata = self.gateway.domain_metadata(name)
            item_counts.append(int(metadata.get('ItemCount', 0)))

        listing = DomainListing(domain_names=domain_names, item_counts=item_counts)
        self.echo(
            f"You have {listing.domain_count} Amazon SimpleDB domain(s) "
            f"containing a total of {listing.total_item_count} items."
        )
        return listing

    def build_sample_records(self) -> List[ReplaceableItem]:
        return build_sample_records()

    def insert_records(self, records: List[ReplaceableItem]) -> None:
        """Put every record into the demo domain with one BatchPutAttributes call."""
        if not records:
            raise ValidationError("Batch insert requires at least one record")
        if len(records) > MAX_BATCH_ITEMS:
            raise ValidationError(
                f"Batch insert accepts at most {MAX_BATCH_ITEMS} records, got {len(records)}",
                errors={'records': len(records)}
            )
        self.gateway.batch_put_attributes(self.domain_name, records)
        self.echo(f"Inserted {len(records)} items into {self.domain_name}.")

    def query_domain(self) -> Dict[str, Any]:
        """Run the select-all query and print the raw result."""
        result = self.gateway.select(
            self.config.select_expression(),
            consistent_read=self.config.consistent_read
        )
        self.echo(str(result))
        return result

    def delete_domain(self) -> None:
        self.gateway.delete_domain(self.domain_name)
        self.echo(f"Deleted domain {self.domain_name}.")

    def wait_for_propagation(self) -> None:
        """Block for the configured delay so the select can see the batch insert.

        SimpleDB reads are eventually consistent; this only makes it likely,
        not certain, that the inserted items are visible.
        """
        delay = self.config.propagation_delay_seconds
        if delay > 0:
            logger.debug(f"Waiting {delay}s for writes to propagate")
            self.sleep(delay)

    def run(self) -> RunReport:
        """
        Execute the full demo sequence.

        Returns:
            RunReport with one StepOutcome per attempted step. The last
            outcome is the failed one when a ServiceError stopped the run.

        Raises:
            ConnectionError: The SimpleDB client could not be created
            ValidationError: The sample records were rejected locally
        """
        report = RunReport()
        records: List[ReplaceableItem] = []

        steps = [
            (STEP_CREATE_DOMAIN, self.create_domain),
            (STEP_LIST_DOMAINS, self.list_domains),
            (STEP_BUILD_RECORDS, self.build_sample_records),
            (STEP_INSERT_RECORDS, lambda: self.insert_records(records)),
            (STEP_WAIT, self.wait_for_propagation),
            (STEP_QUERY_DOMAIN, self.query_domain),
            (STEP_DELETE_DOMAIN, self.delete_domain),
        ]

        for step, action in steps:
            outcome = self._attempt(step, action)
            report.outcomes.append(outcome)
            if not outcome.ok:
                self.report_error(outcome.error)
                break
            if step == STEP_BUILD_RECORDS:
                records = outcome.value

        return report

    def _attempt(self, step: str, action: Callable[[], Any]) -> StepOutcome:
        logger.debug(f"Running step {step}")
        try:
            return StepOutcome.success(step, action())
        except ServiceError as e:
            logger.error(f"Step {step} failed: {e}")
            return StepOutcome.failure(step, e)

    def report_error(self, error: ServiceError) -> None:
        """Print the four diagnostic fields of a service error."""
        self.echo(f"Caught Exception: {error.message}")
        self.echo(f"Response Status Code: {error.status_code}")
        self.echo(f"Error Code: {error.error_code}")
        self.echo(f"Request ID: {error.request_id}")
