from fortest.tracing.lifecycle import (
    clear_traces,
    get_tracer,
    init_tracing,
    set_trace_output_path,
    trace_step,
)

__all__ = [
    "clear_traces",
    "get_tracer",
    "init_tracing",
    "set_trace_output_path",
    "trace_step",
]
