STUDENT_COURSES = 'query($id: ID!) { getStudent(id: $id) { courses { id title } } }'
COURSE_STUDENTS = 'query($id: ID!) { getCourse(id: $id) { students { id } } }'

ENROLL = """
mutation($studentId: ID!, $courseId: ID!) {
  enrollStudent(studentId: $studentId, courseId: $courseId) { id courses { id } }
}
"""

UNENROLL = """
mutation($studentId: ID!, $courseId: ID!) {
  unenrollStudent(studentId: $studentId, courseId: $courseId) { id courses { id } }
}
"""


def test_seed_enrollment_scenario(gql):
    courses = gql(STUDENT_COURSES, id="1")["data"]["getStudent"]["courses"]
    assert courses == [
        {"id": "1", "title": "Data Structures"},
        {"id": "2", "title": "Database Systems"},
    ]

    gql(UNENROLL, studentId="1", courseId="2")
    courses = gql(STUDENT_COURSES, id="1")["data"]["getStudent"]["courses"]
    assert courses == [{"id": "1", "title": "Data Structures"}]

    assert gql('mutation { deleteCourse(id: "1") }')["data"]["deleteCourse"] is True
    assert gql(STUDENT_COURSES, id="1")["data"]["getStudent"]["courses"] == []
    assert gql('{ getCourse(id: "1") { id } }')["data"]["getCourse"] is None


def test_enroll_is_idempotent(gql):
    gql(ENROLL, studentId="2", courseId="1")
    body = gql(ENROLL, studentId="2", courseId="1")

    course_ids = [c["id"] for c in body["data"]["enrollStudent"]["courses"]]
    assert course_ids.count("1") == 1
    assert course_ids == ["1", "2"]


def test_enroll_with_unknown_entity_is_null(gql):
    assert gql(ENROLL, studentId="9", courseId="1")["data"]["enrollStudent"] is None
    assert gql(ENROLL, studentId="1", courseId="9")["data"]["enrollStudent"] is None


def test_relationships_agree_after_enroll_and_unenroll(gql):
    gql(ENROLL, studentId="2", courseId="1")
    assert {"id": "2"} in gql(COURSE_STUDENTS, id="1")["data"]["getCourse"]["students"]
    assert {"id": "1", "title": "Data Structures"} in (
        gql(STUDENT_COURSES, id="2")["data"]["getStudent"]["courses"]
    )

    gql(UNENROLL, studentId="2", courseId="1")
    assert {"id": "2"} not in gql(COURSE_STUDENTS, id="1")["data"]["getCourse"]["students"]
    assert [c["id"] for c in gql(STUDENT_COURSES, id="2")["data"]["getStudent"]["courses"]] == [
        "2"
    ]


def test_new_student_can_enroll(gql):
    student_id = gql(
        'mutation { addStudent(name: "Mona", email: "mona@iti.edu", age: 20, major: "AI") { id } }'
    )["data"]["addStudent"]["id"]
    assert gql(STUDENT_COURSES, id=student_id)["data"]["getStudent"]["courses"] == []

    body = gql(ENROLL, studentId=student_id, courseId="2")
    assert body["data"]["enrollStudent"]["courses"] == [{"id": "2"}]

    students = gql(COURSE_STUDENTS, id="2")["data"]["getCourse"]["students"]
    assert students == [{"id": "1"}, {"id": "2"}, {"id": student_id}]


def test_unenroll_never_enrolled_course_is_silent(gql):
    body = gql(UNENROLL, studentId="2", courseId="1")
    assert body["data"]["unenrollStudent"] == {"id": "2", "courses": [{"id": "2"}]}
    assert "errors" not in body


def test_unenroll_unknown_student_is_null(gql):
    assert gql(UNENROLL, studentId="9", courseId="1")["data"]["unenrollStudent"] is None
