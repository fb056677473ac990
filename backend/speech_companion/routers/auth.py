from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
import re
import uuid

from fastapi import APIRouter, HTTPException, Depends
from fastapi.security import OAuth2PasswordRequestForm, OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, Field, field_validator

from ..settings import settings
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from ..db import get_db
from ..models import User, AuthSession

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)
logging.getLogger('passlib').setLevel(logging.ERROR)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Token(BaseModel):
	access_token: str
	token_type: str = "bearer"


class UserInfo(BaseModel):
	id: str
	name: str
	email: str


class CurrentUser(UserInfo):
	session_id: str


def _bcrypt_safe(password: str) -> str:
	# Truncate password to 72 bytes for bcrypt compatibility
	password_bytes = password.encode('utf-8')
	if len(password_bytes) > 72:
		password_bytes = password_bytes[:72]
	return password_bytes.decode('utf-8', errors='ignore')


def hash_password(password: str) -> str:
	return pwd_context.hash(_bcrypt_safe(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
	return pwd_context.verify(_bcrypt_safe(plain_password), hashed_password)


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
	user_row = db.query(User).filter(User.email == email.strip().lower()).first()
	if user_row and verify_password(password, user_row.password_hash):
		return user_row
	return None


def _resolve_expiry(expires_delta: Optional[timedelta]) -> datetime:
	"""Return a safe expiry timestamp for both the JWT and the session row."""
	delta = expires_delta
	if delta is None:
		minutes = settings.access_token_expire_minutes
		if isinstance(minutes, int) and minutes > 0:
			delta = timedelta(minutes=minutes)
		else:
			delta = timedelta(days=30)
	now = datetime.now(timezone.utc)
	try:
		return now + delta
	except OverflowError:
		# Cap at far future but within datetime bounds
		return datetime.max.replace(tzinfo=timezone.utc)


def create_access_token(data: dict, expire: datetime) -> str:
	to_encode = data.copy()
	to_encode.update({"exp": expire})
	return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


@router.post("/token", response_model=Token)
async def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
	user = authenticate_user(db, form_data.username, form_data.password)
	if not user:
		logger.info("Sign in failed for %s", form_data.username)
		raise HTTPException(status_code=401, detail="Invalid email or password")
	# Each sign-in gets its own server-side session, named by the token's jti
	session_id = uuid.uuid4().hex
	expire = _resolve_expiry(None)
	access_token = create_access_token({"sub": user.id, "jti": session_id}, expire)
	try:
		row = AuthSession(session_id=session_id, user_id=user.id, expires_at=expire.replace(tzinfo=None))
		db.add(row)
		db.commit()
	except SQLAlchemyError:
		db.rollback()
		logger.exception("Could not persist session for %s", user.email)
		raise HTTPException(status_code=500, detail="Sign in failed")
	logger.info("Signed in %s", user.email)
	return Token(access_token=access_token)


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> CurrentUser:
	credentials_exception = HTTPException(
		status_code=401,
		detail="Could not validate credentials",
		headers={"WWW-Authenticate": "Bearer"},
	)
	try:
		payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
		user_id: str | None = payload.get("sub")
		jti: str | None = payload.get("jti")
		if user_id is None or jti is None:
			raise credentials_exception
	except JWTError:
		raise credentials_exception
	# The session row must still exist: sign-out and cleanup revoke tokens by deleting it
	try:
		row = db.get(AuthSession, jti)
		if not row or row.user_id != user_id:
			raise credentials_exception
		now = datetime.utcnow()
		if row.expires_at <= now:
			raise credentials_exception
		row.last_activity_at = now
		db.add(row)
		db.commit()
		user = row.user
	except HTTPException:
		raise
	except SQLAlchemyError:
		# On DB errors, fail closed
		db.rollback()
		logger.exception("Session lookup failed")
		raise credentials_exception
	return CurrentUser(id=user.id, name=user.name, email=user.email, session_id=jti)


@router.get("/me", response_model=UserInfo)
async def me(user: CurrentUser = Depends(get_current_user)):
	return user


@router.post("/signout")
async def signout(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
	try:
		db.query(AuthSession).filter(AuthSession.session_id == user.session_id).delete()
		db.commit()
	except SQLAlchemyError:
		db.rollback()
		logger.exception("Sign out failed for %s", user.email)
		raise HTTPException(status_code=500, detail="Sign out failed")
	logger.info("Signed out %s", user.email)
	return {"ok": True}


class RegisterRequest(BaseModel):
	name: str = Field(min_length=1, max_length=128)
	email: str
	password: str

	@field_validator("name")
	@classmethod
	def _name_not_blank(cls, v: str) -> str:
		v = v.strip()
		if not v:
			raise ValueError("Name is required")
		return v

	@field_validator("email")
	@classmethod
	def _email_format(cls, v: str) -> str:
		v = v.strip().lower()
		if not _EMAIL_RE.match(v):
			raise ValueError("Invalid email address")
		return v

	@field_validator("password")
	@classmethod
	def _password_length(cls, v: str) -> str:
		if len(v) < settings.min_password_length:
			raise ValueError(f"Password must be at least {settings.min_password_length} characters")
		return v


@router.post("/register", status_code=201)
async def register(req: RegisterRequest, db: Session = Depends(get_db)):
	existing = db.query(User).filter(User.email == req.email).first()
	if existing:
		raise HTTPException(status_code=409, detail="An account with this email already exists")
	row = User(name=req.name, email=req.email, password_hash=hash_password(req.password))
	try:
		db.add(row)
		db.commit()
	except IntegrityError:
		# Another request registered the same email first
		db.rollback()
		raise HTTPException(status_code=409, detail="An account with this email already exists")
	except SQLAlchemyError:
		db.rollback()
		logger.exception("Registration failed for %s", req.email)
		raise HTTPException(status_code=500, detail="Registration failed")
	logger.info("Registered %s", req.email)
	return {"ok": True, "id": row.id}
