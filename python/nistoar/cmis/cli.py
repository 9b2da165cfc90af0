"""
a command-line interface for inspecting a CMIS repository server.  The :py:func:`main` function
provides the implementation of the ``cmisinfo`` command, which prints the description of a
repository (or of all the repositories available from a Browser Binding endpoint) as JSON.
"""
import os, sys, re, logging, traceback as tb
from argparse import ArgumentParser

from . import config
from .exceptions import ConfigurationException, CmisBaseException
from .browser.binding import BrowserBinding
from .browser.repository import repository_info_to_json
from .browser.utils import dumps, new_json_object

prog = re.sub(r'\.py$', '', os.path.basename(sys.argv[0]))

class Failure(Exception):
    """
    an exception indicating that the command failed and should exit with a non-zero status
    """
    def __init__(self, message, exitcode=1, cause=None):
        super(Failure, self).__init__(message)
        self.exitcode = exitcode
        self.cause = cause

def define_options(progname):
    """
    return an ArgumentParser instance that is configured with options
    for the command-line interface.
    """
    description = "Print the description of a repository available from a CMIS Browser " \
                  "Binding endpoint as JSON"
    epilog = "If no repository is specified, the descriptions of all repositories are printed."

    parser = ArgumentParser(progname, None, description, epilog)

    parser.add_argument('-c', '--config-file', type=str, dest='cfgfile', metavar='FILE',
                        help="a file (YAML or JSON) containing the client configuration")
    parser.add_argument('-u', '--url', type=str, dest='url', metavar='URL',
                        help="the URL of the Browser Binding endpoint; this overrides the "+
                             "'service_endpoint' config property")
    parser.add_argument('-r', '--repository', type=str, dest='repoid', metavar='ID',
                        help="the identifier of the repository to describe")
    parser.add_argument('-l', '--logfile', action='store', dest='logfile', type=str, metavar='FILE',
                        help="write messages that normally go to standard error to FILE as well.  "+
                             "If -q is also specified, the messages will only go to the logfile")
    parser.add_argument('-v', '--verbose', action='store_true', dest='verbose',
                        help="print more (debug) messages to standard error and/or the log file")
    parser.add_argument('-q', '--quiet', action='store_true', dest='quiet',
                        help="suppress all error and warning messages to standard error")
    return parser

def _setup_logging(opts, progname):
    rootlog = logging.getLogger()
    level = (opts.verbose and logging.DEBUG) or logging.INFO
    if opts.logfile:
        fmt = "%(asctime)s " + progname + ".%(name)s %(levelname)s: %(message)s"
        hdlr = logging.FileHandler(opts.logfile)
        hdlr.setFormatter(logging.Formatter(fmt))
        hdlr.setLevel(logging.DEBUG)
        rootlog.addHandler(hdlr)
        rootlog.setLevel(level)

    if not opts.quiet:
        fmt = progname + ": %(levelname)s: %(message)s"
        hdlr = logging.StreamHandler(sys.stderr)
        hdlr.setFormatter(logging.Formatter(fmt))
        hdlr.setLevel(logging.DEBUG)
        rootlog.addHandler(hdlr)
        rootlog.setLevel(level)
    elif not rootlog.handlers:
        rootlog.addHandler(logging.NullHandler())

def read_config(filepath):
    """
    read the configuration from a file having the given filepath

    :except Failure:  if the file cannot be read or its contents contain syntax errors
    """
    try:
        return config.load_from_file(filepath)
    except ConfigurationException as ex:
        raise Failure(str(ex), 3, ex) from ex
    except OSError as ex:
        raise Failure("problem reading config file, {0}: {1}".format(filepath, ex.strerror),
                      3, ex) from ex

def main(progname, args, out=None):
    """
    describe the requested repository (or all repositories) on the given output stream
    :param str progname:  the name of the command (for messages)
    :param list args:     the command-line arguments
    :param out:           the stream to print to (default: standard out)
    :raises Failure:  if the command fails
    """
    if out is None:
        out = sys.stdout
    parser = define_options(progname)
    opts = parser.parse_args(args)
    _setup_logging(opts, progname)
    log = logging.getLogger("nistoar.cmis").getChild("cli")

    cfg = {}
    if opts.cfgfile:
        cfg = read_config(opts.cfgfile)
    if opts.url:
        cfg['service_endpoint'] = opts.url
    if not cfg.get('service_endpoint'):
        raise Failure("No service endpoint given; use -u or set service_endpoint in config (-c)",
                      3)

    try:
        binding = BrowserBinding(cfg)
        if opts.repoid:
            log.debug("Requesting description of repository %s", opts.repoid)
            result = repository_info_to_json(binding.repository.get_repository_info(opts.repoid))
        else:
            result = new_json_object()
            for info in binding.repository.get_repository_infos():
                result[info.id] = repository_info_to_json(info)

    except ConfigurationException as ex:
        raise Failure(str(ex), 3, ex) from ex
    except CmisBaseException as ex:
        raise Failure("Failed to retrieve repository info: %s" % str(ex), 2, ex) from ex

    print(dumps(result, indent=2), file=out)

def _report(msg, progname):
    rootlog = logging.getLogger()
    if rootlog.handlers:
        rootlog.error(msg)
    else:
        sys.stderr.write("%s: %s\n" % (progname, msg))

def run(progname=None, args=None):
    """
    the entry point for the ``cmisinfo`` command:  run :py:func:`main`, reporting any failure
    and exiting with the appropriate status
    """
    if progname is None:
        progname = prog
    if args is None:
        args = sys.argv[1:]

    try:
        main(progname, args)
    except Failure as ex:
        _report(str(ex), progname)
        sys.exit(ex.exitcode)
    except Exception as ex:
        # unexpected failure
        tb.print_exc()
        _report(str(ex), progname)
        sys.exit(1)
