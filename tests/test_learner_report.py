from app.schemas.learner_summary import LearnerSummary
from app.services.learner_report import format_percent, render_error_report, render_learner_report


def test_format_percent():
    assert format_percent(0.94) == "94.00%"
    assert format_percent(125 / 150) == "83.33%"
    assert format_percent(-0.06) == "-6.00%"


def test_render_empty_report():
    html = render_learner_report([])
    assert "No data to display" in html
    assert 'class="learner-card"' not in html


def test_render_learner_cards():
    html = render_learner_report(
        [
            LearnerSummary(id=125, avg=0.985, scores_by_assignment={1: 0.94, 2: 1.0}),
            LearnerSummary(id=132, avg=0.82, scores_by_assignment={1: 0.78}),
        ]
    )

    assert html.count('class="learner-card"') == 2
    assert "Learner ID: 132" in html
    assert "<strong>Average:</strong> 98.50%" in html
    assert "Assignment 1: 94.00%" in html
    assert "Assignment 2: 100.00%" in html


def test_error_report_escapes_message():
    html = render_error_report("<script>bad</script>")
    assert "&lt;script&gt;" in html
    assert "<script>bad" not in html
