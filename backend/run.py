from roulette import create_app

app = create_app()

if __name__ == '__main__':
    # Threaded server so each request runs on its own worker thread
    app.run(host=app.config['HOST'], port=app.config['PORT'], threaded=True)
