import sys
import logging

from pathlib import Path

from term_lessons.logging_setup import setup_logging
from term_lessons.cli import cli
from term_lessons.lessons import LESSONS
from term_lessons.render.renderer_factory import renderer_factory
from term_lessons.utils import load_default_config

log = logging.getLogger(Path(__file__).stem)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config = cli(argv, load_default_config())
    setup_logging(config.log_level, config.log_file)

    surface = None
    input_source = None
    exit_code = 0
    try:
        surface, input_source = renderer_factory(config.renderer, config.window, config.escape_timeout)
        log.debug("Running lesson %s", config.command)
        LESSONS[config.command](surface, input_source, config)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        log.error(e)
        log.debug("TRACE: ", exc_info=True)
        exit_code = 1
    finally:
        if input_source is not None:
            input_source.stop()
        if surface is not None:
            surface.close()
        print("DONE!")
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
