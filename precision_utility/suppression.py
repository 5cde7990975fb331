DEFAULT_SUPPRESSION_STRING = "*"


def make_suppression_predicate(suppression_string: str = DEFAULT_SUPPRESSION_STRING):
    """
    Builds the default check for suppressed rows.

    A row is suppressed when the view marks it as an outlier, or when every
    selected column of that row holds the suppression string. Every selected
    column is read, so a read failure in one of them fails the check for all
    analyzed columns of that row.
    """

    def is_suppressed(view, selection, row) -> bool:
        is_outlier = getattr(view, "is_outlier", None)
        if is_outlier is not None and is_outlier(row):
            return True
        if not selection:
            return False
        return all(view.get(row, column) == suppression_string for column in selection)

    return is_suppressed


is_suppressed = make_suppression_predicate()
