from app.db.models.attendance import Attendance


def mark(client, auth, records, date="2026-10-01", batch="23", section="A"):
    return client.post(
        "/api/attendance/mark",
        json={"batch": batch, "section": section, "date": date, "attendanceRecords": records},
        headers=auth,
    )


def test_mark_attendance(client, auth, add_student, db):
    ali = add_student("Ali")
    sara = add_student("Sara")

    resp = mark(client, auth, {str(ali["id"]): "Present", str(sara["id"]): "Absent"})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Attendance marked successfully", "count": 2}
    assert db.query(Attendance).count() == 2


def test_marking_same_day_twice_updates(client, auth, add_student, db):
    ali = add_student("Ali")

    mark(client, auth, {str(ali["id"]): "Present"})
    resp = mark(client, auth, {str(ali["id"]): "Absent"})

    assert resp.status_code == 200
    records = db.query(Attendance).filter(Attendance.student_id == ali["id"]).all()
    assert len(records) == 1
    assert records[0].status.value == "Absent"


def test_mark_rejects_unknown_status(client, auth, add_student):
    ali = add_student("Ali")
    resp = mark(client, auth, {str(ali["id"]): "Late"})
    assert resp.status_code == 400


def test_mark_rejects_bad_date(client, auth, add_student):
    ali = add_student("Ali")
    assert mark(client, auth, {str(ali["id"]): "Present"}, date="01-10-2026").status_code == 400
    assert mark(client, auth, {str(ali["id"]): "Present"}, date="2026-02-30").status_code == 400


def test_mark_requires_records(client, auth):
    assert mark(client, auth, {}).status_code == 400


def test_mark_unknown_student(client, auth, add_student, db):
    ali = add_student("Ali")

    resp = mark(client, auth, {str(ali["id"]): "Present", "9999": "Present"})

    assert resp.status_code == 400
    # the record written before the failure stays
    assert db.query(Attendance).count() == 1


def test_mark_without_token(client, db):
    resp = client.post(
        "/api/attendance/mark",
        json={"batch": "23", "section": "A", "date": "2026-10-01", "attendanceRecords": {"1": "Present"}},
    )
    assert resp.status_code == 401
    assert db.query(Attendance).count() == 0


def test_daily_report(client, auth, add_student):
    students = [add_student(n) for n in ("Ali", "Sara", "Bilal", "Maryam")]
    other = add_student("Hamza", "24", "B")
    mark(client, auth, {str(s["id"]): "Present" for s in students[:3]} | {str(students[3]["id"]): "Absent"})
    mark(client, auth, {str(other["id"]): "Absent"}, batch="24", section="B")
    mark(client, auth, {str(other["id"]): "Present"}, date="2026-10-02", batch="24", section="B")

    resp = client.get("/api/attendance/report/date/2026-10-01", headers=auth)

    assert resp.status_code == 200
    report = resp.json()
    assert report["period"] == "2026-10-01"
    assert len(report["records"]) == 5
    assert report["records"][0]["studentId"]["rollNumber"] == "23SWA001"
    assert report["overall"]["present"] == 3
    assert report["overall"]["absent"] == 2
    class_23, class_24 = report["classes"]
    assert class_23["className"] == "23"
    assert class_23["percentage"] == 75.0
    assert class_23["sections"][0]["section"] == "A"
    assert class_24["percentage"] == 0


def test_daily_report_empty(client, auth):
    report = client.get("/api/attendance/report/date/2026-10-01", headers=auth).json()
    assert report["records"] == []
    assert report["overall"]["percentage"] == 0


def test_daily_report_rejects_bad_date(client, auth):
    assert client.get("/api/attendance/report/date/2026-13-45", headers=auth).status_code == 400


def test_monthly_report(client, auth, add_student):
    ali = add_student("Ali")
    mark(client, auth, {str(ali["id"]): "Present"}, date="2026-10-01")
    mark(client, auth, {str(ali["id"]): "Absent"}, date="2026-10-15")
    mark(client, auth, {str(ali["id"]): "Present"}, date="2026-11-01")

    report = client.get("/api/attendance/report/month/2026-10", headers=auth).json()

    assert [r["date"] for r in report["records"]] == ["2026-10-01", "2026-10-15"]
    assert report["overall"]["percentage"] == 50.0


def test_monthly_report_rejects_bad_month(client, auth):
    assert client.get("/api/attendance/report/month/2026-1", headers=auth).status_code == 400


def test_csv_export(client, auth, add_student):
    ali = add_student("Ali")
    mark(client, auth, {str(ali["id"]): "Present"})

    resp = client.get("/api/attendance/report/date/2026-10-01/export", headers=auth)

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    lines = resp.text.strip().splitlines()
    assert lines[0] == "Date,Roll Number,Name,Class,Section,Status"
    assert lines[1] == "2026-10-01,23SWA001,Ali,23,A,Present"


def test_student_percentage(client, auth, add_student):
    ali = add_student("Ali")
    for day, status in [("01", "Present"), ("02", "Present"), ("03", "Absent"), ("04", "Present")]:
        mark(client, auth, {str(ali["id"]): status}, date=f"2026-10-{day}")

    resp = client.get(f"/api/attendance/report/student/{ali['id']}", headers=auth)

    assert resp.json() == {
        "studentId": ali["id"],
        "totalDays": 4,
        "presentDays": 3,
        "absentDays": 1,
        "percentage": 75.0,
    }


def test_student_percentage_without_records(client, auth, add_student):
    ali = add_student("Ali")
    body = client.get(f"/api/attendance/report/student/{ali['id']}", headers=auth).json()
    assert body["totalDays"] == 0
    assert body["percentage"] == 0


def test_student_percentage_unknown_student(client, auth):
    assert client.get("/api/attendance/report/student/777", headers=auth).status_code == 404


def test_deleting_student_removes_attendance(client, auth, add_student, db):
    ali = add_student("Ali")
    mark(client, auth, {str(ali["id"]): "Present"})

    client.delete(f"/api/students/{ali['id']}", headers=auth)

    assert db.query(Attendance).count() == 0


def test_student_percentage_out_of_range_id(client, auth):
    resp = client.get("/api/attendance/report/student/99999999999999999999", headers=auth)
    assert resp.status_code == 404


def test_mark_rejects_out_of_range_student_key(client, auth, db):
    resp = mark(client, auth, {"99999999999999999999": "Present"})
    assert resp.status_code == 400
    assert db.query(Attendance).count() == 0


def test_mark_rejects_non_positive_student_key(client, auth):
    assert mark(client, auth, {"0": "Present"}).status_code == 400
