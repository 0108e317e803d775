from recipebox import config
from recipebox.main import create_app

app = create_app()


# ================================
# START
# ================================
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=config.PORT)
