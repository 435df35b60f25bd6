"""
Core pipeline infrastructure - base classes for all steps.

BasePipelineStep: Abstract base class for pipeline steps
PipelineRunner: Orchestrates sequential step execution
"""

from abc import ABC, abstractmethod
from typing import Optional, Callable, Awaitable, List
import time
import logfire

from pipeline.models.core import GenerationData, StepResult
from pipeline.core.exceptions import StepExecutionError


class BasePipelineStep(ABC):
    """
    Abstract base class for all pipeline steps.

    Each step must implement _execute_step() with its core logic.

    The execute() method wraps step execution with:
    - Logfire observability spans
    - Error handling and logging
    - Timing metrics
    """

    def __init__(self, step_name: str):
        """
        Initialize pipeline step.

        Args:
            step_name: Unique identifier for this step (used in logs)
        """
        self.step_name = step_name

    async def execute(
        self,
        data: GenerationData,
        progress_callback: Optional[Callable[[str, str], Awaitable[None]]] = None
    ) -> StepResult:
        """
        Execute the pipeline step with full observability.

        Args:
            data: Shared data object (modified in-place)
            progress_callback: Optional async callback for progress updates
                             Signature: callback(step_name, status)

        Returns:
            StepResult indicating success/failure

        Raises:
            StepExecutionError: If step fails and cannot continue
        """
        start_time = time.perf_counter()

        with logfire.span(
            f"pipeline.{self.step_name}",
            task_id=data.task_id,
            step=self.step_name
        ):
            try:
                logfire.debug(f"{self.step_name} started", task_id=data.task_id)

                if progress_callback:
                    await progress_callback(self.step_name, "started")

                result = await self._execute_step(data)

                duration = time.perf_counter() - start_time
                data.add_timing(self.step_name, duration)

                if result.metadata is None:
                    result.metadata = {}
                result.metadata["duration"] = duration

                logfire.info(
                    f"{self.step_name} completed",
                    task_id=data.task_id,
                    duration=duration,
                    success=result.success,
                    warnings=result.warnings
                )

                if progress_callback:
                    status = "completed" if result.success else "failed"
                    await progress_callback(self.step_name, status)

                return result

            except Exception as e:
                duration = time.perf_counter() - start_time

                logfire.error(
                    f"{self.step_name} failed",
                    task_id=data.task_id,
                    error=str(e),
                    error_type=type(e).__name__,
                    duration=duration,
                    exc_info=True
                )

                data.add_error(self.step_name, str(e))

                if progress_callback:
                    await progress_callback(self.step_name, "failed")

                raise StepExecutionError(self.step_name, e) from e

    @abstractmethod
    async def _execute_step(self, data: GenerationData) -> StepResult:
        """
        Execute step-specific logic.

        MUST BE IMPLEMENTED by each step.

        Args:
            data: Shared data object (modify in-place)

        Returns:
            StepResult with success=True/False
        """
        pass


class PipelineRunner:
    """
    Orchestrates sequential execution of all pipeline steps.

    Steps run in registration order; the first failure stops the run.
    """

    def __init__(self, steps: Optional[List[BasePipelineStep]] = None):
        self.steps = steps or []

    def register_step(self, step: BasePipelineStep) -> None:
        """
        Add a step to the pipeline.

        Steps execute in the order they are registered.
        """
        self.steps.append(step)

    async def run(
        self,
        data: GenerationData,
        progress_callback: Optional[Callable[[str, str], Awaitable[None]]] = None
    ) -> GenerationData:
        """
        Run all pipeline steps sequentially.

        Args:
            data: Shared data object
            progress_callback: Optional callback for progress updates

        Returns:
            The same data object, populated by every step

        Raises:
            StepExecutionError: If any step fails
        """
        with logfire.span(
            "pipeline.full_run",
            task_id=data.task_id,
            reason=data.fields.intent.reason
        ):
            logfire.info(
                "Pipeline execution started",
                task_id=data.task_id,
                total_steps=len(self.steps)
            )

            for i, step in enumerate(self.steps):
                logfire.debug(
                    f"Executing step {i+1}/{len(self.steps)}",
                    step=step.step_name
                )

                result = await step.execute(data, progress_callback)

                if not result.success:
                    raise StepExecutionError(
                        step.step_name,
                        Exception(result.error or "Unknown error")
                    )

            logfire.info(
                "Pipeline execution completed",
                task_id=data.task_id,
                total_duration=data.total_duration(),
                step_timings=data.step_timings
            )

            return data
