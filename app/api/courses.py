from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_admin
from app.crud import course as crud_course
from app.schemas.course import CourseCreate, CourseOut

router = APIRouter()


@router.post("/", response_model=CourseOut)
def create_course(
    course_in: CourseCreate,
    db: Session = Depends(get_db),
    current_user=Depends(require_admin),
):
    return crud_course.create_course(db, course_in)
