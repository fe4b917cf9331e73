#!/usr/bin/env python3
"""
dropcode — download a dropcode snippet into the current directory.

  dropcode abc123                          snippet on the default domain
  dropcode https://dc.tonary.app/abc123    snippet URL
  dropcode abc123 -o notes.txt             save under a different name
"""

import argparse
import logging
import sys
from pathlib import Path

import requests

from dropcode import config
from dropcode.api import err, fetch_file_info, info, ok
from dropcode.conflict import resolve_conflict
from dropcode.download import download_file
from dropcode.errors import (
    DownloadError,
    EmptyResponseError,
    InvalidInputError,
    MetadataFetchError,
    PromptIOError,
)
from dropcode.fallback import open_fallback
from dropcode.filenames import file_exists, filename_from_url, is_plain_filename
from dropcode.resolver import resolve
from dropcode.spinner import Spinner

logger = logging.getLogger(__name__)


def cmd_get(args):
    cfg = config.load()
    timeout = config.timeout(cfg)
    open_browser = bool(cfg.get('browser', True)) and not args.no_browser

    try:
        snippet = resolve(args.target)
    except InvalidInputError as e:
        logger.debug('Rejected input %r: %s', args.target, e)
        domains = ', '.join(config.SUPPORTED_DOMAINS)
        err('Invalid input. Please provide a valid URL from supported domains '
            f'({domains}) or a snippet ID.')
        sys.exit(1)

    if args.output is not None and not is_plain_filename(args.output):
        err(f'Invalid output name "{args.output}": path separators are not allowed.')
        sys.exit(1)

    info('Fetching snippet:', snippet.snippet_id)
    info('Base URL:', snippet.base_url)

    with requests.Session() as session:
        try:
            with Spinner(f'fetching {snippet.snippet_id}'):
                meta = fetch_file_info(snippet, session=session, timeout=timeout)
        except EmptyResponseError:
            err('File information not found in API response')
            sys.exit(1)
        except MetadataFetchError as e:
            err(f'Failed to fetch file information (Status: {e.status_label})')
            open_fallback(snippet.api_url, open_browser=open_browser)
            sys.exit(1)

        filename = args.output or filename_from_url(meta.download_url, snippet.snippet_id)
        logger.debug('Target filename: %s', filename)

        overwrite = False
        if file_exists(filename):
            decision = resolve_conflict(filename)
            if decision.cancelled:
                print('Download cancelled.')
                return
            filename = decision.filename
            overwrite = decision.overwrite

        info('Downloading file:', filename)
        info('From:', meta.download_url)

        try:
            download_file(meta.download_url, filename, overwrite=overwrite,
                          session=session, timeout=timeout)
        except DownloadError as e:
            err(str(e))
            sys.exit(1)

    ok(f'File downloaded successfully: {Path.cwd() / filename}')


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def build_parser():
    from dropcode import __version__

    domains = '\n'.join(f'  {d}' for d in config.SUPPORTED_DOMAINS)

    parser = argparse.ArgumentParser(
        prog='dropcode',
        description='Download a dropcode snippet into the current directory.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
supported domains:
{domains}

examples:
  dropcode abc123                          bare id, default domain
  dropcode https://dc.tonary.app/abc123    full snippet URL
  dropcode abc123 -o App.tsx               save under a chosen name

If a file with the same name exists you'll be asked whether to replace it,
save a numbered copy, pick another name, or cancel.
""",
    )
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('target', metavar='url-or-id', help='Dropcode URL or snippet ID')
    parser.add_argument('--output', '-o', default=None, metavar='NAME',
                        help='Save the file under this name (default: name from the download URL)')
    parser.add_argument('--no-browser', action='store_true',
                        help="Don't open a browser if fetching file info fails; print the URL instead")
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log debug details to stderr')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        cmd_get(args)
    except PromptIOError as e:
        err(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print()
        err('Interrupted.')
        sys.exit(130)


if __name__ == '__main__':
    main()
