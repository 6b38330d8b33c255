"""Static personal data shown by the portfolio UI."""

from pydantic import BaseModel


class PersonalData(BaseModel):
    name: str
    profile: str
    designation: str
    description: str
    email: str
    address: str
    dev_username: str
    resume: str
    phone: str | None = None
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    stack_overflow: str | None = None
    leetcode: str | None = None


personal_data = PersonalData(
    name="Luis Antonio",
    profile="/profile.png",
    designation="Software Developer",
    description=(
        "My name is Luis Antonio. Professional Software Developer with 5+ years of experience "
        "building web applications and backend systems. Specialized in modern JavaScript "
        "frameworks, APIs, and cloud deployment. Experienced working remotely with international "
        "clients and delivering high-quality, scalable solutions. Strong problem-solving skills, "
        "reliable communication, and committed to clean, maintainable code."
    ),
    email="phoenix.dev351@outlook.com",
    address="Jalan Kiara, Mont Kiara, 50480 Kuala Lumpur, Malaysia",
    dev_username="said7388",
    resume="https://drive.google.com/file/d/1eyutpKFFhJ9X-qpQGKhUNnVRkB5Wer00/view?usp=sharing",
)
