"""Serialization of resolved tags as KEY=value lines"""


def format_tag_line(tag):
    """Format one TagLine as a KEY=value line, newline included"""
    return f"{tag.key}={tag.value}\n"


def write_block(tags, stream):
    """
    Write the tag lines of one track and flush them.

    Blocks are written back to back; the TRACKNUMBER line opening each block
    is the only separator.

    Args:
        tags: Sequence of TagLine for one track
        stream: Text stream to write to
    """
    stream.write("".join(format_tag_line(tag) for tag in tags))
    stream.flush()
