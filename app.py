from dotenv import load_dotenv

# Load environment variables before Config reads them
load_dotenv()

from student_api import __version__, create_app  # noqa: E402

app = create_app()
logger = app.extensions['app_logger']


def main():
    try:
        port = int(app.config['PORT'])

        logger.info("=" * 50)
        logger.info("🚀 Student Management API")
        logger.info("=" * 50)
        logger.info(f"📦 Version: {__version__}")
        logger.info(f"🔐 Environment: {app.config['APP_ENV']}")
        logger.info(f"📊 Database: {app.extensions['database'].name}")
        logger.info(f"🌐 Frontend: {app.config['FRONTEND_DIR']}")
        logger.info("=" * 50)

        if app.config['DEBUG']:
            logger.info(f"🔧 Starting in DEBUG mode on port {port}...")
            app.run(
                host='0.0.0.0',
                port=port,
                debug=True,
                threaded=True,
                use_reloader=False
            )
        else:
            from waitress import serve
            logger.info(f"🚀 Server is running on port {port} with Waitress...")
            serve(
                app,
                host='0.0.0.0',
                port=port,
                threads=8,
                ident='Student-Management-API'
            )

    except KeyboardInterrupt:
        logger.info("👋 Server shutdown requested by user")
    finally:
        app.extensions['database'].close()


if __name__ == '__main__':
    main()
