from nextgen.recommend import BASE_COURSES, GAP_COURSE_TITLE, recommend_courses, upskill_note


def test_no_gap_returns_base_courses():
    assert recommend_courses() == list(BASE_COURSES)
    assert recommend_courses(frozenset()) == list(BASE_COURSES)


def test_gap_course_is_prepended_with_sorted_skills():
    courses = recommend_courses(frozenset({"tableau", "excel", "git"}))
    assert len(courses) == len(BASE_COURSES) + 1
    assert courses[0].title == GAP_COURSE_TITLE
    assert courses[0].skills == ("excel", "git", "tableau")
    assert courses[1:] == list(BASE_COURSES)


def test_upskill_note():
    assert upskill_note(False).startswith("Login")
    assert "skill gaps" in upskill_note(True)
