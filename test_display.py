from display import DictSink, DisplaySink, LabelSink


class FakeLabel:
    def __init__(self):
        self.text = None

    def configure(self, text):
        self.text = text


def test_label_sink_writes_text():
    labels = {key: FakeLabel() for key in ("day", "month", "year", "line")}
    sink = LabelSink(labels)
    sink.set_day(19)
    sink.set_month("Рамадан")
    sink.set_year(1445)
    sink.set_line("19 Рамадан 1445")
    assert labels["day"].text == "19"
    assert labels["month"].text == "Рамадан"
    assert labels["year"].text == "1445"
    assert labels["line"].text == "19 Рамадан 1445"


def test_label_sink_skips_missing_widgets():
    day = FakeLabel()
    sink = LabelSink({"day": day, "month": None})
    sink.set_day(1)
    sink.set_month("Safar")
    sink.set_year(1446)
    sink.set_line("ignored")
    assert day.text == "1"


def test_sinks_satisfy_protocol():
    assert isinstance(DictSink(), DisplaySink)
    assert isinstance(LabelSink({}), DisplaySink)
