"""
Pipeline factory function.

This module provides create_generation_pipeline() which instantiates
all generation steps in the correct order.
"""

from pipeline.core.runner import PipelineRunner


def create_generation_pipeline(service) -> PipelineRunner:
    """
    Factory function to create a fully configured generation pipeline.

    Steps are registered in execution order:
    1. RequestBuilder: Compose the request from the email fields
    2. Completion: Call the generation service
    3. ResponseSplitter: Split the completion into subject and body
    4. PlaceholderTokenizer: Tokenize subject and body, resolve [Your Name]

    Args:
        service: GenerationService used by the completion step

    Returns:
        PipelineRunner with all steps registered and ready to execute

    Example:
        ```python
        from pipeline import create_generation_pipeline
        from pipeline.models import EmailFields, GenerationData

        runner = create_generation_pipeline(service)
        data = GenerationData(task_id="abc-123", fields=EmailFields())
        await runner.run(data)
        print(data.subject, data.body)
        ```
    """
    runner = PipelineRunner()

    # Import step classes lazily to avoid circular dependencies at package import time
    from pipeline.steps.request_builder.main import RequestBuilderStep
    from pipeline.steps.completion.main import CompletionStep
    from pipeline.steps.response_splitter.main import ResponseSplitterStep
    from pipeline.steps.placeholder_tokenizer.main import PlaceholderTokenizerStep

    runner.register_step(RequestBuilderStep())
    runner.register_step(CompletionStep(service))
    runner.register_step(ResponseSplitterStep())
    runner.register_step(PlaceholderTokenizerStep())

    return runner
