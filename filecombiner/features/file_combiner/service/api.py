from ..domain.models import CombineContentResult, CombineRequest, CombineResult
from .combiner import FileCombiner

def combine_files(request: CombineRequest) -> CombineResult:
    """
    Public Service API: Combine matching files into `request.output_path`.

    Returns:
        CombineResult with the bytes written, or an error message.
    """
    return combiner.combine_to_file(request)

def combine_files_to_string(request: CombineRequest) -> CombineContentResult:
    """
    Public Service API: Combine matching files into an in-memory string.
    """
    return combiner.combine_to_string(request)

async def combine_files_async(request: CombineRequest) -> CombineResult:
    return await combiner.combine_to_file_async(request)

async def combine_files_to_string_async(request: CombineRequest) -> CombineContentResult:
    return await combiner.combine_to_string_async(request)

# Singleton Instance for easy import
combiner = FileCombiner()
