from fastapi import APIRouter

from app.data.personal import PersonalData, personal_data

router = APIRouter(prefix="/api", tags=["profile"])


@router.get("/personal-data", response_model=PersonalData)
async def get_personal_data():
    return personal_data
