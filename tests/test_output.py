import io

from linreg.errors import InvalidRange, NoTrainingData
from linreg.output import SEPARATOR, format_predictions, report_error, write_predictions


def test_separator_is_80_dashes():
    assert SEPARATOR == "-" * 80


def test_single_point_has_no_blank_line_before_separator():
    text = format_predictions([(1.0, 2.0)])
    assert text == f"{SEPARATOR}\nInput: 1.0\nPredicted output: 2.0\n{SEPARATOR}\n\n"


def test_negative_values_and_rounding():
    text = format_predictions([(-2.25, -0.049)], num_decimals=1)
    assert "Input: -2.2\n" in text
    assert "Predicted output: -0.0\n" in text


def test_write_to_any_sink():
    class Collector:
        def __init__(self):
            self.chunks = []

        def write(self, text):
            self.chunks.append(text)

    sink = Collector()
    write_predictions([(0.0, 1.0), (1.0, 3.0)], sink, num_decimals=2)
    assert "".join(sink.chunks).count("Predicted output: ") == 2
    assert "Input: 1.00" in "".join(sink.chunks)


def test_report_error_format():
    stream = io.StringIO()
    report_error(InvalidRange(), stream)
    assert stream.getvalue() == "Error: Minimum input value cannot be higher or equal to maximum input value!\n\n"


def test_report_error_defaults_to_stderr(capsys):
    report_error(NoTrainingData())
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Training data missing!\n\n"


def test_conditions_are_value_errors():
    assert isinstance(InvalidRange(), ValueError)
    assert isinstance(NoTrainingData(), ValueError)
