from sqlalchemy.orm import Session
from app.db.models.course import Course


def get_course(db: Session, course_id: int):
    return db.query(Course).filter(Course.id == course_id).first()


def create_course(db: Session, course_in):
    db_course = Course(**course_in.model_dump())
    db.add(db_course)
    db.commit()
    db.refresh(db_course)
    return db_course
