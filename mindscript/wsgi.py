from mindscript.main import app
from mangum import Mangum

# ASGI handler for serverless deployment
handler = Mangum(app, lifespan="off")

if __name__ == "__main__":
    import uvicorn
    from mindscript import config

    uvicorn.run(app, host="0.0.0.0", port=config.SERVER_PORT)
