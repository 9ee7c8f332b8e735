import sys

from .utils import listen_to_logs


USAGE = """usage: termctl [--version | --listen]

  --version   print the version and exit
  --listen    print the logs of termctl programs started with TERMCTL_UDP_LOG=1
"""


def cli(argv=None):
    from . import __version__

    argv = sys.argv[1:] if argv is None else argv
    if "--version" in argv or "version" in argv:
        print("termctl", __version__)
    elif "--listen" in argv:
        try:
            listen_to_logs()
        except KeyboardInterrupt:
            pass
    else:
        print(USAGE)
