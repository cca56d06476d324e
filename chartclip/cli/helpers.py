from typing import Optional

import click


def read_payload(payload: Optional[str]) -> str:
    """Use the argument if there is one, otherwise read stdin. Only the
    trailing newline a shell or clipboard tool adds is removed, the codec
    itself does not tolerate whitespace"""
    if payload is None:
        payload = click.get_text_stream("stdin").read()
    return payload.rstrip("\r\n")
