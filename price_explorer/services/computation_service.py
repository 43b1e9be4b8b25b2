"""
Service for load-profile cost computations.
"""

from typing import List, Optional, Sequence, Union

from .base_service import BaseService
from ..config import app_config
from ..exceptions import DatasetNotFoundError
from ..repositories import DatasetRepository
from ..models import ComputationParameters, ComputationRequest, ComputationResult
from ..utils.load_cost import (
    calculate_hourly_costs,
    parse_load_profile,
    summarize_costs,
    validate_load_profile,
)


class ComputationService(BaseService):
    """Service for run-computation operations."""

    def __init__(self, repository: DatasetRepository = None, allow_negative_load: bool = None):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or DatasetRepository())
        if allow_negative_load is None:
            allow_negative_load = app_config.computation.allow_negative_load
        self.allow_negative_load = allow_negative_load

    def validate_input(self, **kwargs) -> bool:
        """Validate input parameters for a computation."""
        dataset = kwargs.get('dataset')

        if dataset is not None and not self.repository.exists(dataset):
            raise DatasetNotFoundError(f"Dataset not found: {dataset}")

        return True

    def parse_load_profile(self, load_profile: Optional[Union[str, Sequence[float]]]) -> List[float]:
        """Parse a textual or list load profile under the configured rules."""
        if load_profile is None:
            return app_config.default_load_profile
        if isinstance(load_profile, str):
            return parse_load_profile(load_profile, allow_negative=self.allow_negative_load)
        return validate_load_profile(load_profile, allow_negative=self.allow_negative_load)

    def build_parameters(self, request: ComputationRequest) -> ComputationParameters:
        """Validate the wizard inputs of a request."""
        return ComputationParameters(
            load_profile=self.parse_load_profile(request.load_profile),
            shift_percentage=request.shift_percentage,
            shed_hours=request.shed_hours,
            load_up_hours=request.load_up_hours
        )

    def run_computation(self, request: ComputationRequest) -> ComputationResult:
        """
        Run a cost computation for a dataset and load profile.

        Args:
            request: Dataset name, load profile and wizard parameters

        Returns:
            ComputationResult: Per-sample costs and summary totals

        Raises:
            InvalidProfileLengthError, InvalidProfileValueError: Bad load profile
            DatasetNotFoundError: Unknown dataset
            EmptyInputError: Dataset without valid samples
        """
        try:
            parameters = self.build_parameters(request)
            self.validate_input(dataset=request.dataset)

            samples = self.repository.find_samples(request.dataset)
            results = calculate_hourly_costs(samples, parameters.load_profile)
            summary = summarize_costs(results)

            self.logger.info(
                f"Computed costs for '{request.dataset}': {summary.data_points} points, "
                f"total cost {summary.total_cost}")

            return ComputationResult(
                dataset=request.dataset,
                parameters=parameters,
                results=results,
                summary=summary
            )

        except Exception as e:
            self.handle_exception(e, f"Error running computation for '{request.dataset}'")
