#!/usr/bin/env python3
'''
Hide messages inside PNG files.

 $ pngc.py encode image.png ruSt 'hello world' -o secret.png
 $ pngc.py decode secret.png ruSt
'''
import logging
import os
import sys

from pngc import commands
from pngc.exceptions import PngcException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <command> [arguments...]

Commands:

  encode <file> <chunk type> <message> [-o <output>]
  decode <file> <chunk type>
  remove <file> <chunk type>
  print  <file>''')
    sys.exit(1)


def handle_encode(args):
    output = None
    if '-o' in args:
        idx = args.index('-o')
        if idx + 1 >= len(args):
            return False
        output = args[idx + 1]
        args = args[:idx] + args[idx + 2:]

    if len(args) != 3:
        return False

    commands.encode(*args, output=output)
    print('Encoding successful!')
    return True


def handle_decode(args):
    if len(args) != 2:
        return False

    print(commands.decode(*args))
    return True


def handle_remove(args):
    if len(args) != 2:
        return False

    commands.remove(*args)
    print('Chunk removed!')
    return True


def handle_print(args):
    if len(args) != 1:
        return False

    print(commands.print_png(*args))
    return True


handlers = {
    'encode': handle_encode,
    'decode': handle_decode,
    'remove': handle_remove,
    'print': handle_print,
}


def main(argv):
    if len(argv) < 2 or argv[1] not in handlers:
        usage(argv[0])

    try:
        ok = handlers[argv[1]](argv[2:])
    except (PngcException, OSError) as e:
        logger.error(e)
        return 1

    if not ok:
        usage(argv[0])

    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
