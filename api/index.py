from mangum import Mangum

# Import your backend modules
from backend.app import app

# Vercel handler
handler = Mangum(app)
