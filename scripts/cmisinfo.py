#! /usr/bin/env python3
"""
Print the description of a CMIS repository as JSON.

Execute this script with the -h option to display the list of options.
"""
# cmisinfo [-h] [-c CONFFILE] [-u URL] [-r REPOID] [-l LOGFILE] [-v] [-q]
import sys, os
from nistoar.cmis import cli

prog = os.path.basename(sys.argv[0])
if prog.endswith('.py'):
    prog = prog[:-(len('.py'))]

cli.run(prog, sys.argv[1:])
