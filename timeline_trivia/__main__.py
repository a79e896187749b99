import uvicorn

from timeline_trivia import load_settings

if __name__ == "__main__":
    uvicorn.run("timeline_trivia.main:app", host=load_settings.host, port=load_settings.port)
