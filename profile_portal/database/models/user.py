from werkzeug.security import generate_password_hash, check_password_hash
from .base_model import BaseModel
from profile_portal.database.db_manager import DBManager

# Draft field name -> users table column
DRAFT_COLUMNS = {
    'name': 'name',
    'email': 'email',
    'phone': 'phone',
    'houseNo': 'house_no',
    'areaName': 'area_name',
    'landmark': 'landmark',
    'postOffice': 'post_office',
    'state': 'state',
    'pin': 'pin',
}

class User(BaseModel):
    _table_name = 'users'
    _allowed_fields = {
        'username', 'email', 'password_hash', 'name', 'phone', 'avatar',
        'house_no', 'area_name', 'landmark', 'post_office', 'state', 'pin',
        'created_at', 'updated_at', 'deleted_at',
    }

    def __init__(self, id, username, email, password_hash, name=None, phone=None, avatar=None,
                 house_no=None, area_name=None, landmark=None, post_office=None, state=None, pin=None, **kwargs):
        super().__init__(**kwargs)
        self.id = id
        self.username = username
        self.email = email
        self.password_hash = password_hash
        self.name = name
        self.phone = phone
        self.avatar = avatar
        self.house_no = house_no
        self.area_name = area_name
        self.landmark = landmark
        self.post_office = post_office
        self.state = state
        self.pin = pin

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            **self.to_identity(),
        }

    def to_identity(self):
        """Profile data in the shape the profile editor reads (draft field names plus avatar)."""
        identity = {field: getattr(self, column) for field, column in DRAFT_COLUMNS.items()}
        identity['avatar'] = self.avatar
        return identity

    @staticmethod
    def draft_to_columns(draft):
        """Map draft field names onto users columns, ignoring anything unknown."""
        return {DRAFT_COLUMNS[k]: v for k, v in draft.items() if k in DRAFT_COLUMNS}

    @classmethod
    def create(cls, data):
        data = dict(data)
        data['password_hash'] = generate_password_hash(data.pop('password'), method='scrypt')
        return super().create(data)

    @classmethod
    def find_by_username_or_email(cls, login_identifier, include_deleted=False):
        base_query = cls._get_base_query(include_deleted)
        # The base query already has a WHERE clause unless deleted rows are included
        clause = "AND" if not include_deleted else "WHERE"
        query = f'{base_query} {clause} (username = %s OR email = %s)'
        result = DBManager.execute_query(query, (login_identifier, login_identifier), fetch='one')
        return cls.from_row(result)
