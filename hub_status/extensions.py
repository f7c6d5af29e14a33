from flask_cors import CORS

# --- Flask Extensions ---
cors = CORS()
