# app/db/mongo.py
from motor.motor_asyncio import AsyncIOMotorClient
from app.core.config import settings
from app.core.logger import logger


client = AsyncIOMotorClient(settings.MONGODB_URI)
db = client[settings.MONGODB_DB]

# Collections
students_collection = db.get_collection("students")
advisers_collection = db.get_collection("advisers")
adviser_profiles_collection = db.get_collection("adviser_profiles")
mentorship_requests_collection = db.get_collection("mentorship_requests")
messages_collection = db.get_collection("messages")
projects_collection = db.get_collection("projects")


# Function to check DB connection
async def verify_mongodb_connection():
    try:
        await client.server_info()
        logger.info("MongoDB connection established")
    except Exception as e:
        logger.error(f"MongoDB connection failed: {str(e)}")
