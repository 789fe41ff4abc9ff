import logging

from .exceptions import SingularSystemError


# compute the reduced-row echelon form of an augmented matrix in place
def rref(matrix):
    if not matrix:
        return matrix

    num_rows = len(matrix)
    num_cols = len(matrix[0])

    i, j = 0, 0
    while i < num_rows and j < num_cols:
        if matrix[i][j] == 0:
            non_zero_row = i
            while non_zero_row < num_rows and matrix[non_zero_row][j] == 0:
                non_zero_row += 1

            if non_zero_row == num_rows:
                j += 1
                continue

            matrix[i], matrix[non_zero_row] = matrix[non_zero_row], matrix[i]

        pivot = matrix[i][j]
        matrix[i] = [x / pivot for x in matrix[i]]

        for other_row in range(num_rows):
            if other_row == i:
                continue
            factor = matrix[other_row][j]
            if factor != 0:
                matrix[other_row] = [
                    y - factor * x for (x, y) in zip(matrix[i], matrix[other_row])
                ]

        i += 1
        j += 1

    return matrix


def gaussian_elimination(matrix):
    """Solve an augmented system ``[A | b]`` with a unique solution.

    ``matrix`` is a sequence of rows, each holding the coefficients of one
    equation followed by its constant term. The caller's rows are left
    untouched. Returns the unknowns in column order.

    Raises :class:`SingularSystemError` if ``A`` is not of full column rank
    or the system is inconsistent.
    """
    system = [list(row) for row in matrix]
    if not system:
        return []

    num_vars = len(system[0]) - 1
    if len(system) < num_vars:
        raise SingularSystemError(
            f"{len(system)} equations cannot determine {num_vars} unknowns"
        )

    rref(system)

    for i in range(num_vars):
        if system[i][i] != 1:
            logging.debug("no pivot in column %d of reduced system %r", i, system)
            raise SingularSystemError(f"column {i} has no pivot")

    # rows past the pivots must read 0 = 0
    for row in system[num_vars:]:
        if row[-1] != 0:
            raise SingularSystemError("system is inconsistent")

    return [system[i][-1] for i in range(num_vars)]
