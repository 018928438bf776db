from calculator.util import Colors, Span, split_lines


# Class used to create messages, which can be communicated to the user
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CalculatorError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        lines = split_lines(program)
        # An error at the very end of an empty or newline-terminated program
        # points at a line that `split_lines` does not produce
        while len(lines) < span.end_ln:
            lines.append("")

        error_lines = lines[
            max(0, span.start_ln - n_before - 1) : span.end_ln + n_after
        ]
        final_error_lines = []
        start_line_no = max(1, span.start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the expression.
            #    *8. a = 12
            # -> *9. b = a + @
            #    10. c = 15
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            if span.start_ln <= i <= span.end_ln:
                start_col = span.start_col if i == span.start_ln else 0
                end_col = span.end_col if i == span.end_ln else len(line)
                final_line = (
                    f"-> {padding}{i}. {line[:start_col]}"
                    f"{color}{line[start_col:end_col]}{Colors.ENDC}"
                    f"{line[end_col:]}"
                )
            else:
                final_line = f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        message = class_name + ": " + before + "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Communicates all errors to the user by raising them as one exception
    @staticmethod
    def communicate(stage_of_exception) -> None:
        errors = list(ErrorRaiser.ERRORS)
        ErrorRaiser.ERRORS.clear()
        if errors:
            message = "\n\n".join(str(error) for error in errors)
            raise stage_of_exception(message, errors)


# Used to store the errors that have yet to be communicated
class ErrorRaiser:
    ERRORS = []
