import logging

import structlog

# Keep the renderer's debug events out of test output.
structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
)
