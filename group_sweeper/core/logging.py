""" Configuração do registro estruturado com structlog """

import logging

import structlog

from group_sweeper import metrics as metrics_module


def configure_logging(level: int = logging.INFO) -> None:
    """ Configura o structlog para saida JSON estruturada """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            #Entrega o evento ao ProcessorFormatter do handler raiz
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )

    class MetricsLogHandler(logging.Handler):
        """ Handler que incrementa métricas por volume de logs """

        def emit(self, record: logging.LogRecord) -> None:
            metrics_module.LOG_ENTRIES_TOTAL.labels(level=record.levelname.lower()).inc()

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.addHandler(MetricsLogHandler())
    root.setLevel(level)
