def number_lines(lines):
    """
    Assigns each line a line_id equal to its zero-based position in the list,
    replacing whatever line_id the caller may have set.
    """
    for line_id, line in enumerate(lines):
        line.line_id = line_id
    return lines


def line_sort_key(line):
    return line.line_id


def sort_lines(transaction):
    """Sorts the lines of the given transaction by line_id ascending, in place."""
    if transaction is None or transaction.lines is None:
        return transaction

    transaction.lines.sort(key=line_sort_key)
    return transaction
